"""
lexhook config: load from env.

Load from env: load_router_config().
"""
from lexhook.config.router import (
    DIALOG_CODE_HOOK,
    FULFILLMENT_CODE_HOOK,
    RouterConfig,
    load_router_config,
)

__all__ = [
    "DIALOG_CODE_HOOK",
    "FULFILLMENT_CODE_HOOK",
    "RouterConfig",
    "load_router_config",
]
