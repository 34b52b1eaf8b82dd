"""
Quadratic, cubic and quartic B-spline curves in 2D, plotted together with their control points.
"""
from genspline import BSpline, Point2
from genspline import spline_plot as sp


def make_curves():
    quadratic = BSpline(2, [Point2(-1.5, 0.0), Point2(0.0, 1.5), Point2(1.5, 0.0)],
                        [0.0, 0.0, 0.0, 3.0, 3.0, 3.0])
    # knots not clamped, the curve does not touch the end points
    cubic = BSpline(3, [Point2(-1.5, -1.5), Point2(-0.5, 1.5), Point2(0.5, -1.5), Point2(1.5, 1.5)],
                    [0.0, 1.0, 2.0, 2.0, 5.0, 5.0, 6.0, 7.0])
    quartic = BSpline(4, [Point2(-1.8, -1.4), Point2(-1.2, 0.5), Point2(-0.2, -0.8), Point2(-0.6, 0.7),
                          Point2(0.0, 1.6), Point2(1.0, 0.0), Point2(0.6, -0.3), Point2(0.0, -1.0)],
                      [0.0, 0.0, 0.0, 0.0, 0.2, 1.0, 2.0, 3.0, 5.0, 5.0, 5.0, 5.0, 5.0])
    return dict(quadratic=quadratic, cubic=cubic, quartic=quartic)


if __name__ == "__main__":
    plotting = sp.Plotting(sp.PlottingMatplot())
    for name, curve in make_curves().items():
        plotting.plot_curve_2d(curve, n_points=1000, poles=True)
        plotting.show(f"{name}_2d.png")
