from colorpuzzle.complexity.estimator import (
    DEFAULT_ITERATIONS,
    EstimatorConfig,
    estimate_complexity,
    estimate_with_config,
    shuffle_graph,
    shuffled_mapping,
)
