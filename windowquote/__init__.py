"""Window quoting engine: style-code compiler, cost estimator, production planner."""
