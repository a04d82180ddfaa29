__title__ = "currencyapi"
__version__ = "0.1.0"
