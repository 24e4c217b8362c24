from wordle_hybrid.pool import NounClass, VerbClass, WordEntry


def make_entry(word, entropy=0.0, rank=50, noun="S", verb="N", eliminated=False):
    return WordEntry(word, rank, NounClass(noun), VerbClass(verb), entropy=entropy, eliminated=eliminated)
