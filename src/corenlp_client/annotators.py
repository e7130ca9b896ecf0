"""CoreNLP annotator names and predefined pipelines

An annotator is a plain string naming one processing stage of the CoreNLP
pipeline. The constants below cover the stages shipped with CoreNLP; any
other name is passed through to the engine unchanged.

The engine requires annotators in dependency order (``pos`` after
``ssplit``, ``lemma`` after ``pos`` and so on). ``ANNOTATOR_REQUIREMENTS``
documents those prerequisites, but the client never checks them: callers
supply the order the engine accepts.
"""

from types import MappingProxyType
from typing import List, Mapping, NewType, Sequence, Tuple

from .core.validators import validate_annotators


Annotator = NewType("Annotator", str)

# Core annotators
TOKENIZE = Annotator("tokenize")
CLEANXML = Annotator("cleanxml")
SSPLIT = Annotator("ssplit")
DOCDATE = Annotator("docdate")
POS = Annotator("pos")
LEMMA = Annotator("lemma")

# Named entity recognition
NER = Annotator("ner")
REGEXNER = Annotator("regexner")
ENTITYMENTIONS = Annotator("entitymentions")
ENTITYLINK = Annotator("entitylink")

# Parsing
PARSE = Annotator("parse")
DEPPARSE = Annotator("depparse")

# Coreference
COREF = Annotator("coref")
DCOREF = Annotator("dcoref")  # deprecated in favor of coref
MENTION = Annotator("mention")

# Sentiment and semantics
SENTIMENT = Annotator("sentiment")
NATLOG = Annotator("natlog")
OPENIE = Annotator("openie")
TRUECASE = Annotator("truecase")
UDFEATS = Annotator("udfeats")

# Information extraction
RELATION = Annotator("relation")
KBP = Annotator("kbp")

# Quotes and patterns
QUOTE = Annotator("quote")
QUOTE_ATTRIBUTION = Annotator("quote.attribution")
TOKENSREGEX = Annotator("tokensregex")


ALL_ANNOTATORS: Tuple[Annotator, ...] = (
    TOKENIZE, CLEANXML, SSPLIT, DOCDATE, POS, LEMMA,
    NER, REGEXNER, ENTITYMENTIONS, ENTITYLINK,
    PARSE, DEPPARSE,
    COREF, DCOREF, MENTION,
    SENTIMENT, NATLOG, OPENIE, TRUECASE, UDFEATS,
    RELATION, KBP,
    QUOTE, QUOTE_ATTRIBUTION, TOKENSREGEX,
)


# Predefined pipelines
BASIC_ANNOTATORS: Tuple[Annotator, ...] = (TOKENIZE, SSPLIT, POS, LEMMA)

SYNTAX_ANNOTATORS: Tuple[Annotator, ...] = BASIC_ANNOTATORS + (PARSE, DEPPARSE)

NER_ANNOTATORS: Tuple[Annotator, ...] = BASIC_ANNOTATORS + (NER, ENTITYMENTIONS)

SEMANTIC_ANNOTATORS: Tuple[Annotator, ...] = BASIC_ANNOTATORS + (
    NER, PARSE, DEPPARSE, COREF,
)

RELATION_EXTRACTION_ANNOTATORS: Tuple[Annotator, ...] = BASIC_ANNOTATORS + (
    NER, PARSE, DEPPARSE, NATLOG, OPENIE,
)

BUNDLES: Mapping[str, Tuple[Annotator, ...]] = MappingProxyType({
    "basic": BASIC_ANNOTATORS,
    "syntax": SYNTAX_ANNOTATORS,
    "ner": NER_ANNOTATORS,
    "semantic": SEMANTIC_ANNOTATORS,
    "relation": RELATION_EXTRACTION_ANNOTATORS,
})


_BASE = (TOKENIZE, SSPLIT)
_TAGGED = _BASE + (POS,)
_LEMMATIZED = _TAGGED + (LEMMA,)
_NAMED = _LEMMATIZED + (NER,)

# Documentation only, never enforced.
ANNOTATOR_REQUIREMENTS: Mapping[Annotator, Tuple[Annotator, ...]] = MappingProxyType({
    TOKENIZE: (),
    CLEANXML: (),
    DOCDATE: (),
    TRUECASE: (),
    SSPLIT: (TOKENIZE,),
    POS: _BASE,
    LEMMA: _TAGGED,
    NER: _LEMMATIZED,
    REGEXNER: _NAMED,
    ENTITYMENTIONS: _NAMED,
    ENTITYLINK: _NAMED + (ENTITYMENTIONS,),
    PARSE: _TAGGED,
    DEPPARSE: _TAGGED,
    COREF: _NAMED + (PARSE,),
    DCOREF: _NAMED + (PARSE,),
    MENTION: _NAMED + (PARSE,),
    SENTIMENT: _BASE + (PARSE,),
    NATLOG: _LEMMATIZED + (DEPPARSE,),
    OPENIE: _LEMMATIZED + (DEPPARSE, NATLOG),
    UDFEATS: _TAGGED,
    RELATION: _NAMED + (PARSE,),
    KBP: _NAMED + (PARSE, COREF),
    QUOTE: _BASE,
    QUOTE_ATTRIBUTION: _NAMED + (DEPPARSE, COREF, QUOTE),
    TOKENSREGEX: _BASE,
})


def annotators_to_strings(annotators: Sequence[Annotator]) -> List[str]:
    """Convert annotators to plain strings, order preserved"""
    return [str(ann) for ann in annotators]


def strings_to_annotators(names: Sequence[str]) -> List[Annotator]:
    """Convert plain strings to annotators, order preserved"""
    return [Annotator(name) for name in names]

