from buckaroo_gateway.audit.logger import log_event

__all__ = ["log_event"]
