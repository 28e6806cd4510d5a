"""
models/health.py
----------------
Health report for the service layer's readiness endpoint.
"""

from dataclasses import asdict, dataclass


@dataclass
class Health:
    mysql_connected: bool = False
    api_server_started: bool = False

    def to_dict(self) -> dict:
        return asdict(self)
