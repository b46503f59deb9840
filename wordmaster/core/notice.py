from __future__ import annotations

from dataclasses import dataclass, field

MAX_OPACITY = 255
# One opacity step per 6ms; fully faded after 1530ms.
FADE_DIVISOR = 6
# Upward drift per unit of fade.
DRIFT_DIVISOR = 2


@dataclass
class FadeOutNotice:
    """Floating score message that drifts upward while it fades out.

    Milliseconds and fade steps that do not divide evenly are carried into
    the next update, so the fade depends only on the total elapsed time and
    not on how finely it is sliced.
    """

    text: str
    x: int
    y: int
    color: str = "#000000"
    opacity: int = MAX_OPACITY
    _ms_carry: int = field(default=0, init=False, repr=False, compare=False)
    _drift_carry: int = field(default=0, init=False, repr=False, compare=False)

    def update(self, delta_time: int) -> None:
        step, self._ms_carry = divmod(self._ms_carry + delta_time, FADE_DIVISOR)
        self.opacity = max(0, self.opacity - step)
        drift, self._drift_carry = divmod(self._drift_carry + step, DRIFT_DIVISOR)
        self.y -= drift

    def is_expired(self) -> bool:
        return self.opacity == 0
