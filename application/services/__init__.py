from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .history_service import HistoryService
from .rate_repository import RateRepository
from .sync_service import SyncService

__all__ = ['ConversionService', 'CurrencyService', 'HistoryService', 'RateRepository', 'SyncService']
