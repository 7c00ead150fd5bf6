"""State/store layer.

This package is the single source of truth for the rider's selection and
every collection derived from it. Components change state only through the
named transitions of :class:`~pyctabus.state.store.StateStore`.
"""
