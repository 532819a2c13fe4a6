from .base import ApiKeySource, ExchangeRateProvider
from .exchangeratesapi import ExchangeRatesAPIProvider

__all__ = ['ApiKeySource', 'ExchangeRateProvider', 'ExchangeRatesAPIProvider']
