import io

from converter_cli import ConverterCLI
from converter_controller import ConverterController
from ipconv import Notation


def _cli(binary_display="grouped"):
    out, err = io.StringIO(), io.StringIO()
    cli = ConverterCLI(ConverterController(binary_display=binary_display), out=out, err=err)
    return cli, out, err


def test_convert_once_prints_every_notation():
    cli, out, err = _cli()
    code = cli.convert_once(Notation.DOTTED_HEX, "C0.A8.01.01")
    assert code == 0
    assert out.getvalue().splitlines() == [
        "dotted: 192.168.1.1",
        "binary: 11000000.10101000.00000001.00000001",
        "hex: c0.a8.01.01",
        "octal: 300.250.001.001",
        "decimal: 3232235777",
    ]
    assert err.getvalue() == ""


def test_convert_once_reports_error_without_output():
    cli, out, err = _cli()
    code = cli.convert_once(Notation.BINARY, "1" * 31)
    assert code == 1
    assert out.getvalue() == ""
    assert err.getvalue().startswith("error: ")


def test_interactive_session():
    cli, out, err = _cli(binary_display="flat")
    stdin = io.StringIO("decimal 4294967295\ndotted 1.2.3\nhistory\nquit\ndotted 1.1.1.1\n")
    cli.launch(stdin)
    text = out.getvalue()
    assert "binary: " + "1" * 32 in text
    assert "decimal 4294967295 -> 255.255.255.255" in text
    assert "Exiting" in text
    # nothing after quit is processed
    assert "1.1.1.1" not in text
    assert "expected 4 dot-separated fields" in err.getvalue()


def test_interactive_unknown_notation_and_help():
    cli, out, err = _cli()
    cli.launch(io.StringIO("ipv6 ::1\nhelp\n"))
    assert "Unknown notation" in err.getvalue()
    assert "Command syntax" in out.getvalue()


def test_interactive_stops_at_end_of_input():
    cli, out, err = _cli()
    cli.launch(io.StringIO("hex 0a.00.00.01"))
    assert "dotted: 10.0.0.1" in out.getvalue()


def test_convert_once_reports_huge_decimal_as_error():
    cli, out, err = _cli()
    code = cli.convert_once(Notation.DECIMAL, "9" * 5000)
    assert code == 1
    assert out.getvalue() == ""
    assert "value out of [0,4294967295]" in err.getvalue()
