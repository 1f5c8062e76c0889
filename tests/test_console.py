import pytest

from cargo_loader.console import ConsolePrompter, collect_goods
from cargo_loader.errors import InputAborted
from cargo_loader.models import Good


def prompter_for(scripted_input, answers):
    printed = []
    prompter = ConsolePrompter(input_fn=scripted_input(answers), print_fn=printed.append)
    return prompter, printed


def test_collects_goods_in_order(scripted_input):
    prompter, printed = prompter_for(scripted_input, ["2", "A", "100", "10", "B", "450", "20"])
    staged = collect_goods(prompter)

    assert list(staged) == [Good("A", 100, 10), Good("B", 450, 20)]
    assert "Good #1" in printed
    assert "Good #2" in printed


def test_zero_goods(scripted_input):
    prompter, _ = prompter_for(scripted_input, ["0"])
    assert len(collect_goods(prompter)) == 0


def test_bad_count_is_asked_again(scripted_input):
    prompter, printed = prompter_for(scripted_input, ["two", "-1", "1", "A", "1", "1"])
    staged = collect_goods(prompter)

    assert len(staged) == 1
    errors = [line for line in printed if line.startswith("Invalid input")]
    assert len(errors) == 2


@pytest.mark.parametrize("bad_weight", ["heavy", "0", "-3", "nan", "inf"])
def test_bad_weight_is_asked_again(scripted_input, bad_weight):
    prompter, printed = prompter_for(scripted_input, ["1", "A", bad_weight, "5", "2"])
    staged = collect_goods(prompter)

    assert staged.get(0) == Good("A", 5, 2)
    assert any(line.startswith("Invalid input") for line in printed)


def test_zero_price_is_allowed_but_negative_is_not(scripted_input):
    prompter, printed = prompter_for(scripted_input, ["1", "A", "5", "-1", "0"])
    staged = collect_goods(prompter)

    assert staged.get(0).unit_price == 0
    assert printed.count("Invalid input: Value must be zero or more.") == 1


def test_empty_name_is_asked_again(scripted_input):
    prompter, _ = prompter_for(scripted_input, ["1", "", "  Rice ", "5", "2"])
    assert collect_goods(prompter).get(0).name == "Rice"


def test_end_of_input_aborts(scripted_input):
    prompter, _ = prompter_for(scripted_input, ["2", "A", "1", "1", "B"])
    with pytest.raises(InputAborted):
        collect_goods(prompter)


def test_rejections_are_logged(scripted_input, caplog):
    prompter, _ = prompter_for(scripted_input, ["x", "0"])
    with caplog.at_level("INFO", logger="cargo_loader.console"):
        collect_goods(prompter)
    assert "Rejected console entry" in caplog.text
