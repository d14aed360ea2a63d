"""
Services module - the algorithms that run over a cohort.

- strength: pairwise connection score (edge-weight oracle)
- graph_service: weighted compatibility graph
- matching_service: deferred-acceptance roommate matching
- referral_service: cheapest referral chain to a company
- pod_service: greedy pod formation
- messaging_service: concurrent chat/friend-request demo
- export_service: dashboard JSON export
"""
