"""
forcegraph: force-directed 2D graph layout engine

A small simulation engine that lays out graph nodes in the plane:
- Edges act as springs pulling their endpoints together
- Every non-anchored node is pushed away from every other node
- A damped Euler integrator advances node positions each step

The host application owns the render loop: it calls ForceGraph.update(dt)
once per frame and reads positions back through the visitor callbacks.
"""

__version__ = "0.1.0"
