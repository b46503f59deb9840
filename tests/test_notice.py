"""Tests for wordmaster.core.notice – fading score notices."""

from __future__ import annotations

from wordmaster.core.notice import MAX_OPACITY, FadeOutNotice


class TestFadeOutNotice:
    def test_starts_opaque(self):
        n = FadeOutNotice(text="+3", x=100, y=200)
        assert n.opacity == MAX_OPACITY == 255
        assert n.color == "#000000"
        assert not n.is_expired()

    def test_single_tick(self):
        n = FadeOutNotice(text="+3", x=100, y=200)
        n.update(20)
        # step = 20 // 6 = 3, drift = 3 // 2 = 1
        assert n.opacity == 252
        assert n.y == 199
        assert n.x == 100

    def test_small_delta_does_nothing(self):
        n = FadeOutNotice(text="+3", x=0, y=0)
        n.update(5)
        assert n.opacity == 255
        assert n.y == 0

    def test_one_large_update_expires(self):
        n = FadeOutNotice(text="+3", x=0, y=300)
        n.update(1530)
        assert n.opacity == 0
        assert n.is_expired()

    def test_fixed_ticks_expire_after_1530ms(self):
        n = FadeOutNotice(text="+3", x=0, y=300)
        # 76 * 20 = 1520ms, 77 * 20 = 1540ms
        for _ in range(76):
            n.update(20)
            assert not n.is_expired()
        n.update(20)
        assert n.is_expired()

    def test_opacity_never_increases_or_goes_negative(self):
        n = FadeOutNotice(text="+1", x=0, y=0)
        previous = n.opacity
        for _ in range(200):
            n.update(20)
            assert 0 <= n.opacity <= previous
            previous = n.opacity

    def test_drifts_upward(self):
        n = FadeOutNotice(text="+1", x=0, y=250)
        for _ in range(10):
            n.update(20)
        # 200ms fades 33 steps, half of that is drift
        assert n.y == 234

    def test_short_ticks_still_expire(self):
        n = FadeOutNotice(text="+3", x=0, y=300)
        for _ in range(305):
            n.update(5)
        assert n.opacity == 1
        n.update(5)
        assert n.is_expired()

    def test_one_ms_ticks_expire_at_1530ms(self):
        n = FadeOutNotice(text="+3", x=0, y=300)
        for _ in range(1529):
            n.update(1)
        assert not n.is_expired()
        n.update(1)
        assert n.is_expired()

    def test_fade_independent_of_slicing(self):
        coarse = FadeOutNotice(text="+3", x=0, y=300)
        fine = FadeOutNotice(text="+3", x=0, y=300)
        coarse.update(700)
        for _ in range(140):
            fine.update(5)
        assert (fine.opacity, fine.y) == (coarse.opacity, coarse.y)

    def test_carry_not_part_of_equality(self):
        a = FadeOutNotice(text="+3", x=0, y=300)
        b = FadeOutNotice(text="+3", x=0, y=300)
        a.update(5)
        assert a == b
