# Core module exports
from rulechain.core.config import settings, get_settings, Settings
from rulechain.core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
    schema_logger,
    validation_logger,
)
