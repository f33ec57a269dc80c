"""
Tests Package

Test suite for the tutor matching service.

Modules:
- test_core: Settings, error conversion and trace-id logging
- test_factor_scorers: The six factor scorers
- test_matching: Weights, aggregation, reasons, engine and ranker
- test_availability: Availability model, editor and booking view
- test_search_filters: Pre-ranking filters and result orderings
- test_store_client: Tutor store client against a mocked transport
- test_api: FastAPI endpoints

Run all tests:
    pytest tutormatch/tests/
"""
