import pytest

from cloudflare_ddns.config import Config
from cloudflare_ddns.scheduling_policy import SchedulingPolicy


@pytest.mark.parametrize(
    "requested, enforce, expected",
    [
        # ✅ Normal interval passes through
        (300, True, 300),

        # ⚠️ Too fast, enforced → clamped
        (5, True, Config.MIN_CYCLE_INTERVAL),

        # ⚠️ Too fast, not enforced → allowed
        (5, False, 5),
    ],
)
def test_effective_interval(requested, enforce, expected):
    policy = SchedulingPolicy(requested_interval=requested, enforce_policy=enforce)

    assert policy.effective_interval() == expected


def test_next_sleep_subtracts_elapsed_and_never_goes_negative():
    policy = SchedulingPolicy(requested_interval=300, enforce_policy=True)

    assert policy.next_sleep(12.5) == pytest.approx(287.5)
    assert policy.next_sleep(900) == 0.0
