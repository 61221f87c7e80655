"""HTTP service exposing badges and install redirects."""

from .app import RequestConfigError, ServiceSettings, create_app, decode_config_param, run_service

__all__ = ["RequestConfigError", "ServiceSettings", "create_app", "decode_config_param", "run_service"]
