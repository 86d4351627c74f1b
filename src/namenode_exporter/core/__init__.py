"""Domain core: metric models, bean mapping and collection."""
