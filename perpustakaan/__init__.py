"""Console library lending system with priority borrower queues, in three variants."""

__version__ = "0.1.0"