"""Testes do uniforms.py: envio das matrizes row-major para o GL.

As funcoes do GL sao trocadas por gravadores, nao precisa de contexto.
"""

import logging
import numpy as np
import pytest

uniforms = pytest.importorskip("uniforms")

from numeric import FLOAT
from transform import translate, perspective, identity, upper3x3


@pytest.fixture
def gl_calls(monkeypatch):
    calls = []
    for name in ("glUniformMatrix4fv", "glUniformMatrix3fv", "glUniform3fv"):
        monkeypatch.setattr(uniforms, name,
                            lambda *args, _name=name: calls.append((_name, args)))
    return calls


class TestColumnMajor:
    def test_translation_moves_to_last_four(self):
        e = uniforms.column_major(translate(1, 2, 3))
        assert e.shape == (16,)
        assert e.dtype == FLOAT
        np.testing.assert_array_equal(e[12:15], (1, 2, 3))
        np.testing.assert_array_equal(e[[3, 7, 11]], (0, 0, 0))

    def test_is_transpose(self):
        M = np.arange(16, dtype=FLOAT).reshape(4, 4)
        e = uniforms.column_major(M)
        for r in range(4):
            for c in range(4):
                assert e[c*4 + r] == M[r, c]

    def test_source_untouched(self):
        M = translate(4, 5, 6)
        uniforms.column_major(M)
        assert M[0, 3] == 4


class TestUpload:
    def test_mat4_transposed_on_upload(self, gl_calls):
        M = translate(1, 2, 3)
        uniforms.set_mat4(7, M)
        name, (loc, count, transpose, data) = gl_calls[0]
        assert name == "glUniformMatrix4fv"
        assert (loc, count) == (7, 1)
        assert transpose == uniforms.GL_TRUE
        np.testing.assert_array_equal(data, M)
        assert data.dtype == FLOAT and data.flags["C_CONTIGUOUS"]

    def test_mat3(self, gl_calls):
        uniforms.set_mat3(2, upper3x3(identity()))
        name, (loc, count, transpose, data) = gl_calls[0]
        assert name == "glUniformMatrix3fv"
        assert transpose == uniforms.GL_TRUE
        assert data.shape == (3, 3)

    def test_vec3(self, gl_calls):
        uniforms.set_vec3(4, (0.0, 5.0, 10.0))
        name, (loc, count, data) = gl_calls[0]
        assert name == "glUniform3fv"
        np.testing.assert_array_equal(data, (0, 5, 10))
        assert data.dtype == FLOAT

    def test_transform_pair(self, gl_calls):
        M = translate(1, 0, 0)
        VP = perspective(1.0, 1.0, 0.1, 10.0)
        uniforms.set_transform_uniforms(0, 1, M, VP)
        assert [c[1][0] for c in gl_calls] == [0, 1]
        np.testing.assert_array_equal(gl_calls[1][1][3], VP)

    def test_missing_location_is_logged(self, gl_calls, caplog):
        with caplog.at_level(logging.DEBUG, logger="uniforms"):
            uniforms.set_mat4(-1, identity())
        assert len(gl_calls) == 1
        assert "location -1" in caplog.text
