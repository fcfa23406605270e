import numpy as np
from pipeflow.colebrook import solve_colebrook_white
from pipeflow.reynolds import hydraulic_diameter, reynolds_u_dh_nu

# Water at 20 °C in a 136 mm commercial steel pipe
nu = 1.0e-6                 # m2/s
velocity = 13.75            # m/s
epsilon = 0.15              # mm
radius = 68                 # mm

area = np.pi * radius**2
perimeter = 2 * np.pi * radius
D_H = hydraulic_diameter(area=area, perimeter=perimeter)

Re = reynolds_u_dh_nu(u=velocity, d_h=D_H / 1000, nu=nu)

for method in ['bisection', 'brent']:
    result = solve_colebrook_white(method, epsilon, D_H, Re, verbose=1)
    print(f'{method}: f = {result.root:.6f} ({result.iterations} iterations, '
          f'{result.function_calls} function calls)')
