"""Pytest configuration for owasp_vocab tests."""
import io
import logging
import sys
from pathlib import Path

# Add src/ to path for src-layout imports
_PROJECT_ROOT = Path(__file__).parent.parent
_SRC = _PROJECT_ROOT / 'src'
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

import pytest
import structlog


@pytest.fixture
def user_id():
    return 'user123'


@pytest.fixture
def captured_logger(request):
    """A structlog logger that writes JSON lines into a string buffer.

    Yields ``(logger, buffer)``.
    """
    from owasp_vocab.config import LoggingConfig
    from owasp_vocab.observability.logging import build_processors

    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    std_logger = logging.getLogger(f'test_capture.{request.node.name}')
    std_logger.handlers = [handler]
    std_logger.setLevel(logging.DEBUG)
    std_logger.propagate = False

    config = LoggingConfig(app_id='foobar.netportal_auth')
    logger = structlog.wrap_logger(
        std_logger,
        processors=[
            *build_processors(config),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    yield logger, buf
    std_logger.handlers = []
