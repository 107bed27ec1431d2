# renderer/integrator.py
"""
Recursive radiance estimator.

At every diffuse bounce the next direction is drawn from an equal mixture of
light sampling and the material's own PDF (when the scene has lights), and
the contribution is weighted by scattering_pdf / mixture_pdf. Specular
bounces follow their fixed ray.
"""
import math

from pathtrace.core.pdf import HittablePDF, MixturePDF
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3

# Self-intersection guard for secondary rays
T_MIN = 0.001
MAX_DEPTH = 50

BLACK = Vector3(0, 0, 0)


def _sanitize(color: Vector3) -> Vector3:
    """Zero out NaN, infinite and negative channels."""
    return Vector3(*(c if math.isfinite(c) and c > 0 else 0.0 for c in color))


def sky_color(background, ray: Ray) -> Vector3:
    if callable(background):
        return background(ray)
    return background


def radiance(ray: Ray, world, lights, background, depth: int, rng) -> Vector3:
    """
    Returns the radiance arriving along ray, following at most depth bounces.

    background is either a colour or a callable taking the escaping ray;
    lights, if not None, is a hittable of the emitters to sample directly.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf, rng)
    if rec is None:
        return sky_color(background, ray)

    material = rec.material
    emitted = material.emitted(ray, rec, rec.u, rec.v, rec.p)

    srec = material.scatter(ray, rec, rng)
    if srec is None:
        return emitted

    if srec.is_specular:
        incoming = radiance(srec.specular_ray, world, lights, background, depth - 1, rng)
        return emitted + _sanitize(srec.attenuation * incoming)

    if lights is not None:
        pdf = MixturePDF(HittablePDF(lights, rec.p), srec.pdf)
    else:
        pdf = srec.pdf

    scattered = Ray(rec.p, pdf.generate(rng), ray.time)
    pdf_value = pdf.value(scattered.direction)
    if not math.isfinite(pdf_value) or pdf_value <= 0:
        return emitted

    scattering_pdf = material.scattering_pdf(ray, rec, scattered)
    incoming = radiance(scattered, world, lights, background, depth - 1, rng)
    contribution = srec.attenuation * incoming * (scattering_pdf / pdf_value)
    return emitted + _sanitize(contribution)
