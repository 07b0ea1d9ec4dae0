import re
from typing import Any

from pydantic import BaseModel as PydanticBaseModel


ARGS_BLOCK_PATTERN = re.compile(
    r'\n\s*Args:\s*\n(.*?)(?:\n\s*\n|\n\s*[A-Z][a-z]+:|\Z)',
    re.DOTALL,
)
ARG_LINE_PATTERN = re.compile(r'^\s*(\w+):\s*(.*)$')


def parse_docstring_args(docstring: str | None) -> dict[str, str]:
    """Parse the Args block of a docstring into a name -> text mapping.

    Continuation lines are joined onto the preceding argument.
    """
    if not docstring:
        return {}

    args_match = ARGS_BLOCK_PATTERN.search(docstring)
    if not args_match:
        return {}

    descriptions: dict[str, list[str]] = {}
    current_field = None

    for line in args_match.group(1).split('\n'):
        field_match = ARG_LINE_PATTERN.match(line)
        if field_match:
            current_field = field_match.group(1)
            first_part = field_match.group(2).strip()
            descriptions[current_field] = [first_part] if first_part else []
        elif current_field and line.strip():
            descriptions[current_field].append(line.strip())

    return {
        name: ' '.join(parts).strip()
        for name, parts in descriptions.items()
        if parts
    }


class BaseModel(PydanticBaseModel):
    """Custom BaseModel.

    Extends Pydantic's BaseModel to fill in missing field descriptions
    from the Args block of the class docstring once, when the model
    class is defined.
    """

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        descriptions = parse_docstring_args(cls.__doc__)
        for field_name, field_info in cls.model_fields.items():
            if field_info.description is None and field_name in descriptions:
                field_info.description = descriptions[field_name]
