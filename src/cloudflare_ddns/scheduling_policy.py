# --- Project imports ---
from .config import Config
from .logger import get_logger


class SchedulingPolicy:
    def __init__(
            self,
            requested_interval: int = None,
            enforce_policy: bool = None,
        ):
        self.requested_interval = (
            Config.CYCLE_INTERVAL if requested_interval is None else requested_interval
        )
        self.enforce_policy = (
            Config.ENFORCE_MIN_INTERVAL if enforce_policy is None else enforce_policy
        )
        self.min_interval = Config.MIN_CYCLE_INTERVAL
        self.logger = get_logger("scheduling_policy")

    def effective_interval(self) -> int:
        """
        Returns the interval (seconds) between the starts of two cycles.

        When enforcement is enabled, guarantees:
            interval >= MIN_CYCLE_INTERVAL
        """
        if self.requested_interval >= self.min_interval:
            return self.requested_interval

        # --- Production enforcement ---
        if self.enforce_policy:
            self.logger.warning(
                "CYCLE_INTERVAL=%ss is below safe minimum (%ss). Enforcing %ss.",
                self.requested_interval,
                self.min_interval,
                self.min_interval,
            )
            return self.min_interval

        # --- Testing mode: warn if unsafe, but do not enforce ---
        self.logger.warning(
            "CYCLE_INTERVAL=%ss is below safe minimum (%ss). Allowed because ENFORCE_MIN_INTERVAL=false.",
            self.requested_interval,
            self.min_interval,
        )
        return self.requested_interval

    def next_sleep(self, elapsed: float) -> float:
        return max(0.0, self.effective_interval() - elapsed)
