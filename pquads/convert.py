'''
Move quads between rdflib datasets and pquads streams.

The default graph of a Dataset corresponds to the quads without a label.
'''
import logging

from rdflib import Dataset, Graph
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

from .quads import Quad
from .reader import Reader
from .writer import Writer


logger = logging.getLogger(__name__)


def _label(context):
    '''Dataset.quads() can return the graph or its identifier depending on the rdflib version'''
    if isinstance(context, Graph):
        context = context.identifier

    if context is None or context == DATASET_DEFAULT_GRAPH_ID:
        return None

    return context


def dump_dataset(dataset: Dataset, stream, options=None) -> int:
    '''Write all the quads of the dataset and return how many they are.

    The quads are sorted, so that the ones sharing subject and predicate are
    next to each other.'''
    quads = sorted(
        (Quad(s, p, o, _label(c)) for s, p, o, c in dataset.quads((None, None, None, None))),
        key=lambda q: (q.subject.n3(), q.predicate.n3(), q.object.n3()),
    )

    with Writer(stream, options) as writer:
        count = writer.write_quads(quads)

    logger.info('written %d quads (largest message %d bytes)' % (count, writer.max_message_size))

    return count


def load_dataset(stream, max_size=0) -> Dataset:
    dataset = Dataset()

    count = 0
    with Reader(stream, max_size) as reader:
        for quad in reader:
            # a None context is not the default graph for Dataset.add()
            dataset.add(tuple(quad[:3]) if quad.label is None else tuple(quad))
            count += 1

    logger.info('read %d quads' % count)

    return dataset
