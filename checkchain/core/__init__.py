# Core module exports
from checkchain.core.config import Settings, get_settings
from checkchain.core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    generate_correlation_id,
    api_logger,
    validation_logger,
    registry_logger,
)
