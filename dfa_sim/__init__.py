"""
DFA Simulator

Core modules:
- models: the automaton 5-tuple (Q, Sigma, delta, q0, F) and its validation
- engine: the run simulation (is_accepted)
- trace: run trace dataclasses returned by the engine
- reporting: text rendering of run traces (no behavior changes)
"""
