"""
Daily Report Generator
Structures plain-text daily work reports and exports them to Word and PDF
"""

__version__ = "1.0.0"
