import math
import numpy as np

# Tipo escalar de todos os vetores e matrizes (float32, o mesmo que o GL espera)
FLOAT = np.float32

PI = math.pi

def deg2rad(n):
    return n * (PI / 180.0)

def rad2deg(n):
    return n * (180.0 / PI)

def squared(n):
    return n * n
