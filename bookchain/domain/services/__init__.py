"""Domain services for the checkout chain."""

from bookchain.domain.services.chain_audit import ChainAuditReport, audit_blocks

__all__: list[str] = ["ChainAuditReport", "audit_blocks"]
