"""Domain layer for nutriplan.

Pure business logic for nutrition targets, independent of any
persistence, transport or presentation layer.
"""
