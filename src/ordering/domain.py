"""Ordering bounded context — order intake and fulfillment orchestration.

Takes a purchase request through stock, payment and delivery stations and
reports one unified outcome. Value objects for the request live in this
domain; the stations themselves belong to their own contexts.
"""

from protean.domain import Domain

ordering = Domain(name="ordering")
