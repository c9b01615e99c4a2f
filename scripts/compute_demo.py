from fixed_beam.domain.inputs import BeamInput, STANDARD
from fixed_beam.engine.stress import compute
from fixed_beam.engine.units import to_imperial
from fixed_beam.view.formatting import format_deflection, format_moment, format_stress
from fixed_beam.view.renderer_svg import render_svg

# P=1000 N al centro, L=4 m, acero, rectangular 100x200 mm
inp = BeamInput(load=1000.0, span_length=4.0, modulus_of_elasticity=2e11, width=0.1, height=0.2)
res = compute(inp)

print("I [m^4] =", res.moment_of_inertia)
print("M =", format_moment(res.bending_moment, res.units))
print("σ =", format_stress(res.max_bending_stress, res.units))
print("δmax =", format_deflection(res.max_deflection, res.units))

imp = to_imperial(inp)
res_imp = compute(imp)
print("\n[imperial] M =", format_moment(res_imp.bending_moment, res_imp.units))
print("[imperial] δmax =", format_deflection(res_imp.max_deflection, res_imp.units))

std = BeamInput(load=5000.0, span_length=6.0, modulus_of_elasticity=2e11, beam_type=STANDARD, standard_section="W16x40")
res_std = compute(std)
print("\n[W16x40] σ =", format_stress(res_std.max_bending_stress, res_std.units))

with open("deflection_demo.svg", "w", encoding="utf-8") as f:
    f.write(render_svg(res))
print("SVG: deflection_demo.svg")
