"""
# Contention based test harness.
"""
