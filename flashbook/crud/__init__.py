from flashbook.crud.items import create_item, add_items_bulk, editable_fields, get_item, list_items, update_item, delete_item
from flashbook.crud.grammar import (
    create_grammar,
    add_grammar_bulk,
    get_grammar,
    list_grammar,
    update_grammar,
    delete_grammar
)
from flashbook.crud.vocabulary import (
    create_vocab,
    add_vocab_bulk,
    get_vocab,
    list_vocab,
    update_vocab,
    delete_vocab
)
from flashbook.crud.sentence import (
    create_sentence,
    add_sentences_bulk,
    get_sentence,
    list_sentences,
    update_sentence,
    delete_sentence
)
from flashbook.crud.review import SCHEMAS_BY_KIND, get_items, save_srs, apply_rating, persist_srs, get_review_log

__all__ = [
    "create_item",
    "add_items_bulk",
    "get_item",
    "list_items",
    "update_item",
    "editable_fields",
    "delete_item",
    "create_grammar",
    "add_grammar_bulk",
    "get_grammar",
    "list_grammar",
    "update_grammar",
    "delete_grammar",
    "create_vocab",
    "add_vocab_bulk",
    "get_vocab",
    "list_vocab",
    "update_vocab",
    "delete_vocab",
    "create_sentence",
    "add_sentences_bulk",
    "get_sentence",
    "list_sentences",
    "update_sentence",
    "delete_sentence",
    "SCHEMAS_BY_KIND",
    "get_items",
    "save_srs",
    "apply_rating",
    "persist_srs",
    "get_review_log",
]
