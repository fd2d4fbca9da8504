"""
twoadic core package

Eventually-constant 2-adic integers:
- Bit symbol with complement and natural order
- Tagged representation (negative tail, -1, 0, positive tail)
- Lazy restartable bit-stream view over a value
- Total order, structural complement, construction from fixed-width ints
- Bit-matrix export (torch tensor if available; python lists otherwise)
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
