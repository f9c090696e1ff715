from classicgraphs.util.sequences import node_range, pairwise_edges
