"""
Budget verifier: reconcile a bank statement against a budget log and report
bank transactions that were never entered in the budget.
"""

__version__ = "0.1.0"
