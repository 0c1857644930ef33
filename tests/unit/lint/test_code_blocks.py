"""Tests for the code block check."""

from pathlib import Path

from skilldocs.core.markdown import CodeBlock
from skilldocs.lint.code_blocks import check_code_block, check_code_blocks
from tests.test_utils.skill_tree import SkillWriter, make_lint_context


def _block(language: str | None, body: str, *, closed: bool = True) -> CodeBlock:
    return CodeBlock(start_line=1, end_line=3, language=language, body=body, closed=closed)


class TestCheckCodeBlock:
    def test_tagged_block_passes(self) -> None:
        assert check_code_block(_block("yaml", "apiVersion: v1\nkind: Service"), ()) == []

    def test_missing_language(self) -> None:
        problems = check_code_block(_block(None, "kubectl get pods"), ())

        assert [(p.rule, p.severity) for p in problems] == [("code-fence-language", "error")]

    def test_unclosed_fence(self) -> None:
        problems = check_code_block(_block("bash", "kubectl get pods", closed=False), ())

        assert [p.rule for p in problems] == ["unclosed-code-fence"]

    def test_unknown_language(self) -> None:
        problems = check_code_block(_block("klingon", "qapla"), ())

        assert [(p.rule, p.severity) for p in problems] == [("unknown-language", "warning")]

    def test_extra_language_is_known(self) -> None:
        assert check_code_block(_block("cue", "x: 1"), ("cue",)) == []

    def test_mismatch(self) -> None:
        body = 'resource "aws_instance" "web" {\n  ami = "ami-123"\n}'
        problems = check_code_block(_block("yaml", body), ())

        assert [(p.rule, p.severity) for p in problems] == [("code-fence-mismatch", "warning")]
        assert "looks like hcl" in problems[0].message

    def test_compatible_detection(self) -> None:
        assert check_code_block(_block("yaml", '{"a": 1}'), ()) == []
        assert check_code_block(_block("ts", "const a = require('a');"), ()) == []

    def test_junit_method_without_modifiers_is_java(self) -> None:
        body = "@Test\nvoid rejectsEmptyName() {\n    var user = new User(\"\");\n}"
        assert check_code_block(_block("java", body), ()) == []

    def test_typescript_async_method_is_not_java(self) -> None:
        body = "class Api {\n  private async load() {\n    return fetch(url);\n  }\n}"
        assert check_code_block(_block("typescript", body), ()) == []

    def test_undetectable_declared_language_is_trusted(self) -> None:
        assert check_code_block(_block("text", "apiVersion: v1\nkind: Pod"), ()) == []


def test_check_code_blocks_reports_fence_line(
    tmp_project: Path, write_skill: SkillWriter
) -> None:
    write_skill(
        "devops-pipelines",
        "# DevOps\n\n```\nterraform plan\n```\n",
        references={"helm.md": "```yaml\nreplicaCount: 2\nimage: nginx\n```\n"},
    )

    findings = check_code_blocks(make_lint_context(tmp_project))

    assert len(findings) == 1
    assert findings[0].path == "skills/devops-pipelines/SKILL.md"
    assert findings[0].line == 8
    assert findings[0].rule == "code-fence-language"
