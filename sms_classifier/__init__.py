"""
SMS Transaction Classifier
===========================
Classifies bank/merchant SMS as spam, transactional or non-transactional,
extracts amount, direction and merchant, and serves it over HTTP.
"""

__version__ = "1.0.0"
