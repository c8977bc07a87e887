"""Unit tests for Lambertian shading.

Tests cover:
- Full diffuse response with the light along the surface normal
- Zero response with the light behind the surface
- Background on a miss
- Explicit scene parameters (material and light colors)
- Coloring a precomputed hit record and nearest-hit selection
"""

import math

import taichi as ti


def _shade_default(direction, light):
    """Shade a camera ray from the origin against the default scene."""
    from diffuse_orbit.core.ray import make_ray
    from diffuse_orbit.core.shading import shade
    from diffuse_orbit.core.vector import vec3

    result = ti.Vector.field(3, dtype=ti.f64, shape=())
    dx, dy, dz = direction
    lx, ly, lz = light

    @ti.kernel
    def test_kernel():
        ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(dx, dy, dz))
        result[None] = shade(ray, vec3(lx, ly, lz))

    test_kernel()
    r = result[None]
    return (r[0], r[1], r[2])


class TestShadeDefaultScene:
    """Tests for shade() against the fixed yellow sphere."""

    def test_light_along_normal_gives_material_color(self):
        """Test d = 1 when the light lies on the normal through the hit point."""
        # Hit point (0, 0, -0.5), normal (0, 0, 1)
        color = _shade_default((0.0, 0.0, -1.0), (0.0, 0.0, 2.0))
        assert color == (1.0, 1.0, 0.0)

    def test_light_behind_surface_gives_black(self):
        """Test the diffuse term is clamped at zero, never negative."""
        color = _shade_default((0.0, 0.0, -1.0), (0.0, 0.0, -5.0))
        assert color == (0.0, 0.0, 0.0)

    def test_miss_gives_background(self):
        """Test a ray that misses returns black."""
        color = _shade_default((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        assert color == (0.0, 0.0, 0.0)

    def test_oblique_light_scales_by_cosine(self):
        """Test the diffuse term equals the cosine between N and L."""
        # Hit point (0, 0, -0.5), light direction (0, 1, 0.5) normalized
        color = _shade_default((0.0, 0.0, -1.0), (0.0, 1.0, 0.0))
        expected = 0.5 / math.sqrt(1.25)
        assert abs(color[0] - expected) < 1e-12
        assert abs(color[1] - expected) < 1e-12
        assert color[2] == 0.0


class TestShadeSphere:
    """Tests for shade_sphere() with explicit scene parameters."""

    def test_material_and_light_colors_multiply(self):
        """Test the result is material (*) light scaled by d."""
        from diffuse_orbit.core.ray import make_ray
        from diffuse_orbit.core.shading import shade_sphere
        from diffuse_orbit.core.vector import vec3
        from diffuse_orbit.geometry.sphere import Sphere

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, -1.0))
            sphere = Sphere(center=vec3(0.0, 0.0, -3.0), radius=1.0)
            result[None] = shade_sphere(
                ray,
                sphere,
                vec3(0.5, 1.0, 0.25),
                vec3(0.0, 0.0, 10.0),
                vec3(1.0, 0.5, 2.0),
                vec3(0.1, 0.1, 0.1),
            )

        test_kernel()
        r = result[None]
        assert abs(r[0] - 0.5) < 1e-12
        assert abs(r[1] - 0.5) < 1e-12
        assert abs(r[2] - 0.5) < 1e-12

    def test_miss_returns_given_background(self):
        """Test a miss returns the background passed in."""
        from diffuse_orbit.core.ray import make_ray
        from diffuse_orbit.core.shading import shade_sphere
        from diffuse_orbit.core.vector import vec3
        from diffuse_orbit.geometry.sphere import Sphere

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0))
            sphere = Sphere(center=vec3(0.0, 0.0, -3.0), radius=1.0)
            result[None] = shade_sphere(
                ray,
                sphere,
                vec3(1.0, 1.0, 1.0),
                vec3(0.0, 0.0, 10.0),
                vec3(1.0, 1.0, 1.0),
                vec3(0.2, 0.3, 0.4),
            )

        test_kernel()
        r = result[None]
        assert (r[0], r[1], r[2]) == (0.2, 0.3, 0.4)


class TestShadeHit:
    """Tests for shade_hit() on precomputed intersection records."""

    def test_hit_record_is_shaded_at_its_t(self):
        """Test a hit record is colored at the recorded ray parameter."""
        from diffuse_orbit.core.ray import make_ray
        from diffuse_orbit.core.shading import shade_hit
        from diffuse_orbit.core.vector import vec3
        from diffuse_orbit.geometry.sphere import Sphere, hit_sphere

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, -1.0))
            sphere = Sphere(center=vec3(0.0, 0.0, -1.0), radius=0.5)
            rec = hit_sphere(ray, sphere)
            result[None] = shade_hit(
                ray,
                rec,
                sphere,
                vec3(1.0, 1.0, 0.0),
                vec3(0.0, 0.0, 2.0),
                vec3(1.0, 1.0, 1.0),
                vec3(0.0, 0.0, 0.0),
            )

        test_kernel()
        r = result[None]
        assert (r[0], r[1], r[2]) == (1.0, 1.0, 0.0)

    def test_miss_record_returns_background(self):
        """Test a miss record returns the background without shading."""
        from diffuse_orbit.core.ray import make_ray
        from diffuse_orbit.core.shading import shade_hit
        from diffuse_orbit.core.vector import vec3
        from diffuse_orbit.geometry.sphere import Sphere, SphereHit

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, -1.0))
            sphere = Sphere(center=vec3(0.0, 0.0, -1.0), radius=0.5)
            rec = SphereHit(hit=0, t=0.5)
            result[None] = shade_hit(
                ray,
                rec,
                sphere,
                vec3(1.0, 1.0, 0.0),
                vec3(0.0, 0.0, 2.0),
                vec3(1.0, 1.0, 1.0),
                vec3(0.2, 0.3, 0.4),
            )

        test_kernel()
        r = result[None]
        assert (r[0], r[1], r[2]) == (0.2, 0.3, 0.4)


def _nearer(candidate, best):
    """Evaluate nearer_hit for two (hit, t) pairs."""
    from diffuse_orbit.core.shading import nearer_hit
    from diffuse_orbit.geometry.sphere import SphereHit

    result = ti.field(dtype=ti.i32, shape=())
    c_hit, c_t = candidate
    b_hit, b_t = best

    @ti.kernel
    def test_kernel():
        result[None] = nearer_hit(SphereHit(hit=c_hit, t=c_t), SphereHit(hit=b_hit, t=b_t))

    test_kernel()
    return result[None]


class TestNearerHit:
    """Tests for nearest-hit selection."""

    def test_hit_replaces_miss(self):
        """Test any hit beats a miss."""
        assert _nearer((1, 3.0), (0, 0.0)) == 1

    def test_miss_never_replaces(self):
        """Test a miss does not replace a miss or a hit."""
        assert _nearer((0, 0.0), (0, 0.0)) == 0
        assert _nearer((0, 0.1), (1, 5.0)) == 0

    def test_smaller_t_wins(self):
        """Test the hit with the smaller t is nearer."""
        assert _nearer((1, 0.5), (1, 2.0)) == 1
        assert _nearer((1, 2.0), (1, 0.5)) == 0

    def test_negative_t_competes(self):
        """Test a negative t counts as nearer than a positive one."""
        assert _nearer((1, -1.5), (1, 0.5)) == 1

    def test_tie_keeps_current(self):
        """Test equal t keeps the earlier record."""
        assert _nearer((1, 0.5), (1, 0.5)) == 0
