from inputsview.api.inputs.dto.view import ViewResponse

__all__ = ["ViewResponse"]
