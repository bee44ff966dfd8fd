"""Car-rental back office API package.

Holds the promotion pricing rules and the operational notification fan-out
that runs alongside every mutating back-office action.
"""
