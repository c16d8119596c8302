"""Telemetry: decision logs and system events.

Structure:
    audit/          Decision log (decisions.jsonl)
                    - DecisionEventLogger: one event per check or redaction
    models/         Pydantic models for log event types
    system/         System operational logs (stderr, system.jsonl)
"""

__all__: list[str] = []
