"""
CLI integration tests
"""

import subprocess
import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_cli(*args):
    return subprocess.run(
        [sys.executable, "-m", "zig_binding_generator.main", *args],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT
    )


def test_cli_writes_output_file(natives_file, temp_dir):
    """Test CLI generating a Zig file from a natives database"""
    output_file = temp_dir / "natives.zig"

    result = run_cli("-n", str(natives_file), "-o", str(output_file), "--origin", "https://nativedb.example")

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert output_file.exists(), "Output file not created"
    assert f"Generated bindings: {output_file}" in result.stdout

    content = output_file.read_text()
    assert "// https://nativedb.example" in content
    assert "pub const Entity = struct {" in content
    assert "pub fn getPlayerName(player: types.Player) [*c]const u8" in content


def test_cli_prints_to_stdout(natives_file):
    """Without --output the bindings go to stdout"""
    result = run_cli("--natives", str(natives_file))

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert result.stdout.startswith("// Generated on ")
    assert "// zig fmt: on" in result.stdout
    assert "Processing namespace" not in result.stdout


def test_cli_with_config(natives_file, temp_dir):
    """Test CLI with an XML config file and invoke function override"""
    config_file = temp_dir / "bindings.xml"
    config_file.write_text("""
<bindings one_line_functions="false" generate_comments="false">
    <namespace name="PLAYER"/>
</bindings>
""")
    output_file = temp_dir / "natives.zig"

    result = run_cli("-n", str(natives_file), "-C", str(config_file), "-o", str(output_file),
                     "--invoke-function", "invokeNative")

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    content = output_file.read_text()
    assert "pub const Entity" not in content
    assert "pub fn getPlayerName(player: types.Player) [*c]const u8 {" in content
    assert "        return invoker.invokeNative([*c]const u8, 0x6D0DE6A7B5DA71F8, .{player});" in content
    assert "///" not in content


def test_cli_missing_natives_file(temp_dir):
    result = run_cli("-n", str(temp_dir / "missing.json"))

    assert result.returncode == 1
    assert "Error reading natives file" in result.stderr


def test_cli_invalid_config(natives_file, temp_dir):
    config_file = temp_dir / "bindings.xml"
    config_file.write_text('<bindings zig_compliant="maybe"/>')

    result = run_cli("-n", str(natives_file), "-C", str(config_file))

    assert result.returncode == 1
    assert "Error reading config file" in result.stderr


def test_cli_requires_natives():
    result = run_cli()
    assert result.returncode != 0
