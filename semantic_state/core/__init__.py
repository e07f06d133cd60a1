"""
Semantic state core - engine, drift detection, health scoring, configuration and errors.
"""
