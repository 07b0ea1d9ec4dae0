from unitstat.utils.base_model import BaseModel, parse_docstring_args

__all__ = [
    'BaseModel',
    'parse_docstring_args',
]
