from bidb.example import User, main


def test_user_str_matches_output_format():
    assert str(User(2, "Mark")) == "{2 Mark}"


def test_main_returns_zero_and_prints_two_lines(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Male adult:")
    assert lines[1].startswith("Female not adult:")


def test_main_male_adult_line(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Male adult:       [{2 Mark} {10 Felix}]"


def test_main_female_not_adult_line(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "Female not adult: [{5 Mary} {10324 Janny}]"


def test_main_output_excludes_unindexed_and_adult_women(capsys):
    main()
    out = capsys.readouterr().out
    assert "Bot" not in out
    assert "Kate" not in out
    assert "Andrew" not in out