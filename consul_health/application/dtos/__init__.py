from .verdict_dto import HealthCheckRecordDTO, VerdictDTO

__all__ = ["HealthCheckRecordDTO", "VerdictDTO"]
