from .liqpay import LiqPay

__all__ = ['LiqPay']
