from __future__ import annotations
from core.context import DashboardState

class BaseView:
    def __init__(self, state: DashboardState):
        self.state = state

    def render(self):
        raise NotImplementedError
