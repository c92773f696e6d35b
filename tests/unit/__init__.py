"""
Unit tests for the Mail Categorizer.

Test individual components in isolation:
- Data models (invariants of results and replies)
- Provider registry and selection
- Prompt builder
- Wire-format clients and dispatcher (httpx.MockTransport)
- JSON extraction and response parser
- Rule-based classifier
- Categorizer orchestration and fallback
"""
