from .consul_gateway import ConsulGateway

__all__ = ["ConsulGateway"]
