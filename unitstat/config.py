import logging

from systemd.journal import JournalHandler


def setup_logger(level: int = logging.INFO) -> None:
    """Configure logging to use systemd journal.
    """
    app_logger = logging.getLogger('unitstat')
    app_logger.setLevel(level)

    journal_handler = JournalHandler(SYSLOG_IDENTIFIER='unitstat')

    app_logger.addHandler(journal_handler)
