"""Compiled-in VSOP87D periodic terms, one module per planet.

Every module exposes the per-power slots (``L0``..``L5``, ``B0``..,
``R0``..) and the tuples ``L``, ``B`` and ``R`` listing the slots the
solution uses, lowest power first.  The number of powers differs between
planets and coordinates; that is a property of the published solution.
"""
