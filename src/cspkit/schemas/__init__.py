from src.cspkit.schemas.policy import CSPConfig

__all__ = ["CSPConfig"]
