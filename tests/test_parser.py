from er.parser import Stage, parse_line, parse_stage


def test_single_command_with_args():
    assert parse_line("ls -l /tmp\n") == [Stage("ls", ("-l", "/tmp"))]


def test_pipeline_is_split_on_separator():
    assert parse_line("cat notes.txt | grep todo | wc -l") == [
        Stage("cat", ("notes.txt",)),
        Stage("grep", ("todo",)),
        Stage("wc", ("-l",)),
    ]


def test_arguments_keep_order_and_duplicates():
    stage = parse_stage("  printf   %s  a  a   b ")
    assert stage == Stage("printf", ("%s", "a", "a", "b"))


def test_blank_line_has_no_stages():
    assert parse_line("") == []
    assert parse_line("   \n") == []


def test_empty_fragments_become_none():
    assert parse_line("ls |  | wc") == [Stage("ls", ()), None, Stage("wc", ())]


def test_only_separators_yield_only_empty_stages():
    stages = parse_line("  |  | ")
    assert stages
    assert all(stage is None for stage in stages)


def test_leading_and_trailing_separators():
    assert parse_line(" | ls | ") == [None, Stage("ls", ()), None]


def test_pipe_without_spaces_is_a_literal_token():
    assert parse_line("echo a|b") == [Stage("echo", ("a|b",))]


def test_no_quote_processing():
    assert parse_line("echo 'a b' $HOME") == [Stage("echo", ("'a", "b'", "$HOME"))]


def test_trailing_separator_after_command_is_an_empty_stage():
    assert parse_line("echo a | ") == [Stage("echo", ("a",)), None]
