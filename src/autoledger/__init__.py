"""AutoLedger: used-vehicle inventory, expenses and tax reports."""

__version__ = "1.0.0"
