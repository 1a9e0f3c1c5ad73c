from colorpuzzle.graphs.graph import (
    Graph,
    degrees,
    edge_list,
    from_networkx,
    graph_from_labeled_edges,
    is_valid_graph,
    make_graph,
    max_degree,
    num_edges,
    relabel,
    remove_nodes,
    strip_dangling,
    to_networkx,
)
from colorpuzzle.graphs import families  # registers families
from colorpuzzle.graphs.sampler import GraphSampler, GraphSourceSpec
