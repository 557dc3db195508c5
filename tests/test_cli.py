from qpassgen import cli, generate_password, generate_password_with_meta
from qpassgen import generator

from conftest import ScriptedBitSource, values_for


def test_main_prints_only_the_password(monkeypatch, capsys):
    script = values_for("a" * 16) + values_for("Quantum1Password")
    monkeypatch.setattr(
        generator, "QuantumEngine", lambda config: ScriptedBitSource(script)
    )

    cli.main()

    out = capsys.readouterr().out
    assert out == "Quantum1Password\n"


def test_generate_password_accepts_a_source():
    source = ScriptedBitSource(values_for("aB3!aB3!aB3!aB3!"))
    assert generate_password(source=source) == "aB3!aB3!aB3!aB3!"


def test_generate_password_with_meta_counts_attempts():
    source = ScriptedBitSource(values_for("A" * 16) + values_for("aB3!aB3!aB3!aB3!"))
    result = generate_password_with_meta(source=source)
    assert result.attempts == 2
