"""
Tests for short code generation strategies.
"""
import string

import pytest

from shortener_app.services.short_code_strategies import (
    RandomShortCodeStrategy,
    SecureRandomShortCodeStrategy
)
from shortener_app.services.short_code_factory import (
    ShortCodeFactory,
    ShortCodeStrategyType
)

ALPHANUMERIC = set(string.ascii_letters + string.digits)


@pytest.mark.parametrize("strategy_cls", [RandomShortCodeStrategy, SecureRandomShortCodeStrategy])
class TestRandomStrategies:
    """Test properties shared by both random strategies"""

    def test_generates_correct_length(self, strategy_cls):
        """Test that codes are exactly 6 characters"""
        strategy = strategy_cls(length=6)

        for _ in range(100):
            assert len(strategy.generate()) == 6

    def test_generates_alphanumeric(self, strategy_cls):
        """Test that codes only use a-z, A-Z and 0-9"""
        strategy = strategy_cls()

        for _ in range(100):
            assert set(strategy.generate()) <= ALPHANUMERIC

    def test_different_calls_different_codes(self, strategy_cls):
        """Test that repeated calls are (almost always) distinct"""
        strategy = strategy_cls()

        codes = {strategy.generate() for _ in range(1000)}

        # 62^6 possible codes; a duplicate among 1000 is ~1e-5 likely
        assert len(codes) >= 999

    def test_custom_length(self, strategy_cls):
        """Test that length is configurable"""
        assert len(strategy_cls(length=10).generate()) == 10

    def test_rejects_non_positive_length(self, strategy_cls):
        """Test that an empty code length is refused"""
        with pytest.raises(ValueError):
            strategy_cls(length=0)


class TestRandomStrategyDistribution:

    def test_uses_whole_alphabet(self):
        """Test every one of the 62 characters shows up"""
        strategy = RandomShortCodeStrategy()

        seen = set()
        for _ in range(2000):
            seen.update(strategy.generate())

        assert seen == ALPHANUMERIC


class TestShortCodeFactory:
    """Test strategy factory"""

    def setup_method(self):
        ShortCodeFactory.clear_instances()

    def test_creates_random_strategy(self):
        """Test factory creates random strategy"""
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.RANDOM)
        assert isinstance(strategy, RandomShortCodeStrategy)

    def test_creates_secure_strategy(self):
        """Test factory creates secure strategy"""
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.SECURE)
        assert isinstance(strategy, SecureRandomShortCodeStrategy)

    def test_creates_default_from_settings(self):
        """Test factory uses settings when no type specified"""
        strategy = ShortCodeFactory.create_strategy()
        # random by default
        assert isinstance(strategy, RandomShortCodeStrategy)
        assert strategy.length == 6

    def test_returns_cached_instance(self):
        """Test the same instance is returned for the same type"""
        first = ShortCodeFactory.create_strategy(ShortCodeStrategyType.RANDOM)
        second = ShortCodeFactory.create_strategy(ShortCodeStrategyType.RANDOM)
        assert first is second

    def test_unknown_strategy_from_settings(self, monkeypatch):
        """Test an unknown configured strategy fails loudly"""
        from shortener_app.config import settings
        monkeypatch.setattr(settings, "short_code_strategy", "base62")

        with pytest.raises(ValueError):
            ShortCodeFactory.create_strategy()
