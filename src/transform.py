import math
import numpy as np
from numeric import FLOAT, deg2rad
from vector import normalize, cross, dot, subtract

# Todas as matrizes sao row-major: M[r, c] == M.ravel()[r*4 + c].
# Para o OpenGL enviar com transpose=GL_TRUE (ver uniforms.py).

def fill(n):
    # atribuicao elemento a elemento (nao copia bytes)
    return np.full((4,4), n, dtype=FLOAT)

def identity():
    M = fill(0)
    M[0,0] = 1; M[1,1] = 1; M[2,2] = 1; M[3,3] = 1
    return M

def multiply(A, B):
    # A.B, nao comutativo
    return np.asarray(A, dtype=FLOAT) @ np.asarray(B, dtype=FLOAT)

def upper3x3(M):
    return np.array(M, dtype=FLOAT)[:3,:3]

def perspective(fovy_rad, aspect, znear, zfar):
    """Projecao perspectiva simetrica. O fov vem em RADIANOS (as rotacoes usam graus)."""
    # escalares numpy: znear == zfar ou fov 0 da inf/NaN em vez de excecao
    znear = FLOAT(znear); zfar = FLOAT(zfar)
    f = FLOAT(1.0) / np.tan(FLOAT(fovy_rad) / FLOAT(2.0))
    M = fill(0)
    M[0,0] = f/FLOAT(aspect); M[1,1] = f
    M[2,2] = (zfar + znear) / (znear - zfar)
    M[2,3] = (FLOAT(2.0) * zfar * znear) / (znear - zfar)
    M[3,2] = -1.0
    return M

def lookAt(eye, center, up):
    f = normalize(subtract(center, eye))
    s = normalize(cross(f, up))  # NaN se front for paralelo a up
    u = cross(s, f)
    M = identity()
    M[0,0:3] = s; M[1,0:3] = u; M[2,0:3] = -f
    M[0,3] = -dot(s, eye)
    M[1,3] = -dot(u, eye)
    M[2,3] = dot(f, eye)
    return M

def translate(x, y, z):
    M = identity()
    M[0,3]=x; M[1,3]=y; M[2,3]=z
    return M

def scale(x, y, z):
    M = fill(0)
    M[0,0]=x; M[1,1]=y; M[2,2]=z; M[3,3]=1
    return M

def rotate_euler(x, y, z):
    """Angulos de Euler em GRAUS, equivale a Rx(x) . Ry(y) . Rz(z)."""
    # float() para o resultado nao depender do tipo escalar (ex: float32 de um vec3)
    x = float(x); y = float(y); z = float(z)
    cx = math.cos(deg2rad(x)); sx = math.sin(deg2rad(x))
    cy = math.cos(deg2rad(y)); sy = math.sin(deg2rad(y))
    cz = math.cos(deg2rad(z)); sz = math.sin(deg2rad(z))
    M = identity()
    M[:3,:3] = np.array([
        [ cy*cz,                -cy*sz,                 sy    ],
        [ sx*sy*cz + cx*sz,     -sx*sy*sz + cx*cz,      -sx*cy],
        [-cx*sy*cz + sx*sz,      cx*sy*sz + sx*cz,       cx*cy],], dtype=FLOAT)
    return M

def rotate_euler_v3(v):
    x, y, z = v
    return rotate_euler(x, y, z)

def rotate(axis, angle_deg):
    # Rodrigues; angulo em GRAUS, eixo nulo da NaN
    x, y, z = normalize(axis)
    t = deg2rad(float(angle_deg))
    c = math.cos(t); s = math.sin(t); C = 1.0 - c
    R3 = np.array([
        [x*x*C + c,     x*y*C - z*s, x*z*C + y*s],
        [y*x*C + z*s,   y*y*C + c,   y*z*C - x*s],
        [z*x*C - y*s,   z*y*C + x*s, z*z*C + c  ],], dtype=FLOAT)
    M = identity()
    M[:3,:3] = R3
    return M
