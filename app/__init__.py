"""
Kisan Sahayak

Bilingual (English/Hindi) farmer information backend: a keyword rule engine
for the chat assistant, scheme eligibility ranking, and mock market price
and weather views.
"""

__version__ = "1.0.0"
__author__ = "Kisan Sahayak Team"
__description__ = "Rule-based farmer assistance and scheme eligibility service"
