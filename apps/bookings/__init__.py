"""Bookings app package.

This app owns consultation slot reservations: the calendar rules that
decide which slots are offered, the ledger that grants each slot to at
most one requester, and the API used by the booking widget. The ledger
relies on a unique database constraint on the (date, time) pair, so a
slot cannot be granted twice even when requests race.
"""
