"""Geometry values and the rules that govern them.

This package holds what a point or contour *is* and when it is valid,
independent from *where* it is stored or served (repositories, routers).
"""
