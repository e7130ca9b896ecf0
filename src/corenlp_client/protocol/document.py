"""CoreNLP document schema

A subset of ``edu.stanford.nlp.pipeline.Document`` from CoreNLP.proto, built
through the protobuf descriptor API with the engine's own field numbers.
Fields outside the subset are kept by the protobuf runtime as unknown fields,
so full engine output still parses.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory


PACKAGE = "edu.stanford.nlp.pipeline"

_FDP = descriptor_pb2.FieldDescriptorProto

_TOKEN_FIELDS = [
    ("word", 1, _FDP.TYPE_STRING),
    ("pos", 2, _FDP.TYPE_STRING),
    ("value", 3, _FDP.TYPE_STRING),
    ("category", 4, _FDP.TYPE_STRING),
    ("before", 5, _FDP.TYPE_STRING),
    ("after", 6, _FDP.TYPE_STRING),
    ("originalText", 7, _FDP.TYPE_STRING),
    ("ner", 8, _FDP.TYPE_STRING),
    ("normalizedNER", 9, _FDP.TYPE_STRING),
    ("lemma", 10, _FDP.TYPE_STRING),
    ("beginChar", 11, _FDP.TYPE_UINT32),
    ("endChar", 12, _FDP.TYPE_UINT32),
]

_SENTENCE_FIELDS = [
    ("tokenOffsetBegin", 2, _FDP.TYPE_UINT32),
    ("tokenOffsetEnd", 3, _FDP.TYPE_UINT32),
    ("sentenceIndex", 4, _FDP.TYPE_UINT32),
    ("characterOffsetBegin", 5, _FDP.TYPE_UINT32),
    ("characterOffsetEnd", 6, _FDP.TYPE_UINT32),
]

_DOCUMENT_FIELDS = [
    ("text", 1, _FDP.TYPE_STRING),
    ("docID", 4, _FDP.TYPE_STRING),
]


def _add_scalars(message: descriptor_pb2.DescriptorProto, fields) -> None:
    for name, number, field_type in fields:
        message.field.add(
            name=name,
            number=number,
            type=field_type,
            label=_FDP.LABEL_OPTIONAL,
        )


def _add_repeated(message: descriptor_pb2.DescriptorProto, name: str, number: int, type_name: str) -> None:
    message.field.add(
        name=name,
        number=number,
        type=_FDP.TYPE_MESSAGE,
        label=_FDP.LABEL_REPEATED,
        type_name=f".{PACKAGE}.{type_name}",
    )


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="corenlp_client/document.proto",
        package=PACKAGE,
        syntax="proto2",
    )

    token = file_proto.message_type.add(name="Token")
    _add_scalars(token, _TOKEN_FIELDS)

    sentence = file_proto.message_type.add(name="Sentence")
    _add_repeated(sentence, "token", 1, "Token")
    _add_scalars(sentence, _SENTENCE_FIELDS)

    document = file_proto.message_type.add(name="Document")
    _add_scalars(document, _DOCUMENT_FIELDS)
    _add_repeated(document, "sentence", 2, "Sentence")

    return file_proto


# Private pool so the schema never clashes with a generated CoreNLP module
_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file().SerializeToString())

Token = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.Token"))
Sentence = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.Sentence"))
Document = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.Document"))
