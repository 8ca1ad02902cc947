from __future__ import annotations

from inputsview.core.view import ViewModel


class ViewResponse(ViewModel):
    timestamp: float
