from __future__ import annotations

from engine.core.frame_clock import FrameClock


class _Counter:
    def __init__(self, finish_after: int) -> None:
        self.calls: list[float] = []
        self.finish_after = finish_after

    def tick(self, dt: float) -> bool:
        self.calls.append(dt)
        return len(self.calls) >= self.finish_after


def test_ticks_in_order_and_drops_finished() -> None:
    order: list[str] = []

    class _Named(_Counter):
        def __init__(self, name: str, finish_after: int) -> None:
            super().__init__(finish_after)
            self.name = name

        def tick(self, dt: float) -> bool:
            order.append(self.name)
            return super().tick(dt)

    a = _Named("a", 1)
    b = _Named("b", 3)
    clock = FrameClock([a, b])
    clock.tick(0.1)
    assert clock.active == (b,)
    clock.tick(0.1)
    clock.tick(0.1)
    assert clock.active == ()
    assert order == ["a", "b", "b", "b"]


def test_add_and_explicit_dt() -> None:
    c = _Counter(finish_after=10)
    clock = FrameClock()
    clock.add(c)
    clock.tick(0.25)
    assert c.calls == [0.25]


def test_measured_dt_is_non_negative() -> None:
    c = _Counter(finish_after=10)
    clock = FrameClock([c])
    clock.tick()
    clock.tick()
    assert len(c.calls) == 2
    assert all(dt >= 0.0 for dt in c.calls)
