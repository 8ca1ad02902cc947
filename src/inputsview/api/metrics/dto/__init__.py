from inputsview.api.metrics.dto.metrics import MetricsResponse

__all__ = ["MetricsResponse"]
