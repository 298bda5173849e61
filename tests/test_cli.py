"""Tests for CLI commands."""

from datetime import date
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

import cli
from flashbook.crud import create_grammar, create_sentence, create_vocab, delete_item, get_items, get_review_log
from flashbook.schemas import GrammarCreate, SentenceCreate, VerbConjugation, VocabularyCreate

runner = CliRunner()


@pytest.fixture
def cli_db(session_factory):
    with patch("cli.SessionLocal", session_factory):
        yield session_factory


def test_add_grammar_then_list(cli_db):
    result = runner.invoke(cli.app, ["add-grammar", "--title", "te-iru", "--explanation", "ongoing", "--lesson", "L3"])
    assert result.exit_code == 0, result.output
    assert "Grammar point added" in result.output

    result = runner.invoke(cli.app, ["list-items"])
    assert result.exit_code == 0
    assert "te-iru" in result.output


def test_add_vocab_with_conjugation(cli_db):
    result = runner.invoke(cli.app, [
        "add-vocab", "--word", "taberu", "--reading", "taberu", "--meaning", "to eat", "--te-form", "tabete"
    ])
    assert result.exit_code == 0, result.output

    db = cli_db()
    try:
        _, vocab, _ = get_items(db)
        assert vocab[0].conjugation.te_form == "tabete"
    finally:
        db.close()


def test_lessons_lists_sorted_tags(cli_db):
    db = cli_db()
    try:
        create_grammar(db, GrammarCreate(title="x", lesson="Lesson 2"))
        create_vocab(db, VocabularyCreate(word="y", lesson="Lesson 1"))
    finally:
        db.close()

    result = runner.invoke(cli.app, ["lessons"])
    assert result.exit_code == 0
    assert result.output.index("Lesson 1") < result.output.index("Lesson 2")


def test_delete_unknown_item_fails(cli_db):
    result = runner.invoke(cli.app, ["delete-item", "grammar", "42"])
    assert result.exit_code == 1
    assert "No grammar item with id 42" in result.output


def test_delete_rejects_unknown_kind(cli_db):
    result = runner.invoke(cli.app, ["delete-item", "kanji", "1"])
    assert result.exit_code == 1


def test_review_with_no_cards(cli_db):
    result = runner.invoke(cli.app, ["review"])
    assert result.exit_code == 0
    assert "No cards" in result.output


def test_review_session_rates_each_card(cli_db):
    db = cli_db()
    try:
        create_grammar(db, GrammarCreate(title="kara", explanation="because"))
        create_vocab(db, VocabularyCreate(word="mizu", meaning="water"))
    finally:
        db.close()

    # flip, invalid rating, again; flip, easy
    result = runner.invoke(cli.app, ["review"], input="\nmaybe\nagain\n\neasy\n")
    assert result.exit_code == 0, result.output
    assert "Invalid rating" in result.output
    assert "Session complete" in result.output

    db = cli_db()
    try:
        grammar, vocab, _ = get_items(db)
        assert grammar[0].srs.interval == 0
        assert vocab[0].srs.interval == 2
        assert [e.rating for e in get_review_log(db)] == ["easy", "again"]
    finally:
        db.close()


def test_review_limit(cli_db):
    db = cli_db()
    try:
        create_grammar(db, GrammarCreate(title="a"))
        create_grammar(db, GrammarCreate(title="b"))
    finally:
        db.close()

    result = runner.invoke(cli.app, ["review", "--limit", "1"], input="\ngood\n")
    assert result.exit_code == 0, result.output
    assert "Card 1 of 1" in result.output


def test_due_as_of_date(cli_db):
    db = cli_db()
    try:
        create_grammar(db, GrammarCreate(title="de"), reference_date=date(2030, 1, 1))
    finally:
        db.close()

    result = runner.invoke(cli.app, ["due", "--on", "2029-12-31"])
    assert result.exit_code == 0
    assert "0 cards due" in result.output

    result = runner.invoke(cli.app, ["due", "--on", "2030-01-01"])
    assert "1 card due" in result.output


def test_progress_report(cli_db):
    db = cli_db()
    try:
        create_vocab(db, VocabularyCreate(word="yama"))
    finally:
        db.close()

    result = runner.invoke(cli.app, ["progress"])
    assert result.exit_code == 0, result.output
    assert "Cards due for review: 1" in result.output


def test_review_skips_card_deleted_during_session(cli_db):
    db = cli_db()
    try:
        gone_id = create_grammar(db, GrammarCreate(title="node")).id
        kept_id = create_grammar(db, GrammarCreate(title="noni")).id
        loaded = get_items(db)
        delete_item(db, "grammar", gone_id)
    finally:
        db.close()

    # The deck was loaded before the first card was removed
    with patch("cli.get_items", return_value=loaded):
        result = runner.invoke(cli.app, ["review"], input="\ngood\n\ngood\n")

    assert result.exit_code == 0, result.output
    assert f"No grammar item with id {gone_id}" in result.output
    assert "skipping card" in result.output
    assert "Card 2 of 2" in result.output
    assert "Session complete" in result.output

    db = cli_db()
    try:
        grammar, _, _ = get_items(db)
        assert [(g.id, g.srs.interval) for g in grammar] == [(kept_id, 1)]
        assert [(e.item_id, e.rating) for e in get_review_log(db)] == [(kept_id, "good")]
    finally:
        db.close()


@pytest.fixture
def mixed_items(cli_db):
    db = cli_db()
    try:
        create_grammar(db, GrammarCreate(title="made", explanation="Until a point in time", lesson="L1"))
        create_vocab(db, VocabularyCreate(word="umi", reading="umi", meaning="Sea", lesson="L1"))
        create_vocab(db, VocabularyCreate(word="kawa", reading="kawa", meaning="River", lesson="L2"))
        create_sentence(db, SentenceCreate(japanese_text="umi ni ikimasu", translation="I go to the sea", lesson="L2"))
    finally:
        db.close()
    return cli_db


def test_list_items_by_kind(mixed_items):
    result = runner.invoke(cli.app, ["list-items", "--kind", "vocab"])
    assert result.exit_code == 0, result.output
    assert "umi" in result.output and "kawa" in result.output
    assert "made" not in result.output


def test_list_items_search(mixed_items):
    result = runner.invoke(cli.app, ["list-items", "--search", "SEA"])
    assert result.exit_code == 0, result.output
    assert "umi" in result.output
    assert "kawa" not in result.output
    assert "made" not in result.output

    result = runner.invoke(cli.app, ["list-items", "--kind", "grammar", "--search", "until"])
    assert "made" in result.output

    result = runner.invoke(cli.app, ["list-items", "--lesson", "L1", "--search", "river"])
    assert result.exit_code == 0
    assert "No items match" in result.output


def test_list_items_rejects_unknown_kind(mixed_items):
    result = runner.invoke(cli.app, ["list-items", "--kind", "kanji"])
    assert result.exit_code == 1


def test_edit_item_updates_fields(mixed_items):
    result = runner.invoke(cli.app, ["edit-item", "vocab", "1", "--set", "meaning=Ocean", "--set", "lesson=L3"])
    assert result.exit_code == 0, result.output
    assert "Updated vocab 1" in result.output

    db = mixed_items()
    try:
        _, vocab, _ = get_items(db)
        assert (vocab[0].meaning, vocab[0].lesson) == ("Ocean", "L3")
        # Schedule untouched by edits
        assert vocab[0].srs.interval == 0
    finally:
        db.close()


def test_edit_item_merges_conjugation(cli_db):
    db = cli_db()
    try:
        vocab_id = create_vocab(db, VocabularyCreate(word="nomu", conjugation=VerbConjugation(past="nonda"))).id
    finally:
        db.close()

    result = runner.invoke(cli.app, ["edit-item", "vocab", str(vocab_id), "--set", "te-form=nonde"])
    assert result.exit_code == 0, result.output

    db = cli_db()
    try:
        _, entries, _ = get_items(db)
        assert entries[0].conjugation.te_form == "nonde"
        assert entries[0].conjugation.past == "nonda"
    finally:
        db.close()


def test_edit_item_rejects_bad_fields(mixed_items):
    for pair in ["colour=blue", "interval=30", "id=7", "meaning"]:
        result = runner.invoke(cli.app, ["edit-item", "vocab", "1", "--set", pair])
        assert result.exit_code == 1, pair

    # Grammar has no verb forms
    result = runner.invoke(cli.app, ["edit-item", "grammar", "1", "--set", "te-form=x"])
    assert result.exit_code == 1


def test_edit_missing_item_fails(cli_db):
    result = runner.invoke(cli.app, ["edit-item", "sentence", "99", "--set", "translation=x"])
    assert result.exit_code == 1
    assert "No sentence item with id 99" in result.output
