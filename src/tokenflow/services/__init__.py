from tokenflow.services.token_updater import TokenStateUpdater

__all__ = ["TokenStateUpdater"]
