from loguru import logger

from marblevo.evolution.engine.config import GeneProbabilities
from marblevo.evolution.genome import GENES, MarbleDNA
from marblevo.evolution.random_source import RandomSource


def crossover_genomes(
    father: MarbleDNA,
    mother: MarbleDNA,
    father_genes_probability: GeneProbabilities,
    rng: RandomSource,
) -> MarbleDNA:
    """Build a child genome gene by gene.

    Each gene gets its own draw: the father's value is taken when the draw is
    below that gene's father probability, otherwise the mother's. Neither
    parent is modified.
    """
    genes: dict[str, float] = {}
    for gene in GENES:
        from_father = rng.random() < father_genes_probability.for_gene(gene)
        genes[gene] = father.gene(gene) if from_father else mother.gene(gene)
        logger.trace(
            "crossover: {}={} from {}",
            gene,
            genes[gene],
            "father" if from_father else "mother",
        )
    return MarbleDNA(**genes)
