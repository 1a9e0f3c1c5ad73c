from colorpuzzle.data.dataset import (
    DatasetConfig,
    PuzzleDataset,
    PuzzleRecord,
    build_or_load_dataset,
    label_graph,
    load_jsonl,
)
