import numpy as np
from numeric import FLOAT, squared

def vec3(x, y, z):
    return np.array([x, y, z], dtype=FLOAT)

def mat3(values):
    # 9 escalares em ordem row-major
    return np.array(values, dtype=FLOAT).reshape(3, 3)

def length(v):
    v = np.asarray(v, dtype=FLOAT)
    return FLOAT(np.sqrt(squared(v[0]) + squared(v[1]) + squared(v[2])))

def dot(v1, v2):
    v1 = np.asarray(v1, dtype=FLOAT); v2 = np.asarray(v2, dtype=FLOAT)
    return FLOAT(v1[0]*v2[0] + v1[1]*v2[1] + v1[2]*v2[2])

def cross(v1, v2):
    v1 = np.asarray(v1, dtype=FLOAT); v2 = np.asarray(v2, dtype=FLOAT)
    return np.array([
        v1[1]*v2[2] - v1[2]*v2[1],
        v1[2]*v2[0] - v1[0]*v2[2],
        v1[0]*v2[1] - v1[1]*v2[0]], dtype=FLOAT)

def normalize(v):
    """Divide v pelo seu comprimento.

    Sem protecao para o vetor nulo: 0/0 da NaN (o numpy emite um
    RuntimeWarning, nao uma excecao). Quem chama deve evitar normalizar
    vetores de comprimento zero.
    """
    v = np.asarray(v, dtype=FLOAT)
    return v / length(v)

def scale(v, magnitude):
    # descarta o comprimento de v; magnitude negativa inverte o sentido
    return normalize(v) * FLOAT(magnitude)

def add(v1, v2):
    return np.asarray(v1, dtype=FLOAT) + np.asarray(v2, dtype=FLOAT)

def subtract(v1, v2):
    return np.asarray(v1, dtype=FLOAT) - np.asarray(v2, dtype=FLOAT)

def multiply_mat3(m, v):
    e = np.asarray(m, dtype=FLOAT).ravel()
    v = np.asarray(v, dtype=FLOAT)
    return np.array([
        e[0]*v[0] + e[1]*v[1] + e[2]*v[2],
        e[3]*v[0] + e[4]*v[1] + e[5]*v[2],
        e[6]*v[0] + e[7]*v[1] + e[8]*v[2]], dtype=FLOAT)
