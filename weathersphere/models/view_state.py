"""View state for the lookup screen."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from .weather import CurrentConditions


class ViewStatus(str, Enum):
    """Status of the lookup view."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class ViewState(BaseModel):
    """Immutable snapshot of what the view shows.

    Only the transition methods below should be used to move between states.
    A loading state may still carry the previously displayed conditions so
    the last result stays on screen until the new lookup resolves.
    """

    model_config = ConfigDict(frozen=True)

    status: ViewStatus = ViewStatus.IDLE
    conditions: CurrentConditions | None = None
    error: str | None = None

    @model_validator(mode="after")
    def check_combination(self) -> "ViewState":
        if self.status == ViewStatus.IDLE and (self.conditions is not None or self.error):
            raise ValueError("idle state cannot carry a result or an error")
        if self.status == ViewStatus.LOADING and self.error:
            raise ValueError("loading state cannot carry an error")
        if self.status == ViewStatus.SUCCESS and (self.conditions is None or self.error):
            raise ValueError("success state requires conditions and no error")
        if self.status == ViewStatus.FAILED and (not self.error or self.conditions is not None):
            raise ValueError("failed state requires an error and no conditions")
        return self

    @property
    def is_loading(self) -> bool:
        return self.status == ViewStatus.LOADING

    def begin_search(self) -> "ViewState":
        """Enter the loading state, clearing any error."""
        return ViewState(status=ViewStatus.LOADING, conditions=self.conditions)

    def succeed(self, conditions: CurrentConditions) -> "ViewState":
        """Replace any prior result with a new one."""
        return ViewState(status=ViewStatus.SUCCESS, conditions=conditions)

    def fail(self, error: str) -> "ViewState":
        """Enter the failed state, clearing any prior result."""
        return ViewState(status=ViewStatus.FAILED, error=error)
