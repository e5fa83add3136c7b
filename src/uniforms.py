import logging
import numpy as np
from OpenGL.GL import *
from numeric import FLOAT

logger = logging.getLogger(__name__)

# As matrizes deste projeto sao row-major e o GLSL le column-major,
# por isso todos os envios usam transpose=GL_TRUE.

def column_major(M):
    """Copia contigua de M^T achatada, para quem nao pode transpor no envio
    (ex: glUniformMatrix4fv com transpose=GL_FALSE em GLES 2 / WebGL)."""
    return np.ascontiguousarray(np.asarray(M, dtype=FLOAT).T).ravel()

def _check(location, name):
    if location == -1:
        logger.debug("uniform %s com location -1, o GL vai ignorar", name)

def set_mat4(location, M):
    _check(location, "mat4")
    glUniformMatrix4fv(location, 1, GL_TRUE, np.ascontiguousarray(M, dtype=FLOAT))

def set_mat3(location, M):
    _check(location, "mat3")
    glUniformMatrix3fv(location, 1, GL_TRUE, np.ascontiguousarray(M, dtype=FLOAT))

def set_vec3(location, v):
    _check(location, "vec3")
    glUniform3fv(location, 1, np.array(v, dtype=FLOAT))

def set_transform_uniforms(loc_model, loc_view_proj, M, VP):
    set_mat4(loc_model, M)
    set_mat4(loc_view_proj, VP)
