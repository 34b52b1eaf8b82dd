"""
Text plots of simple 1D quadratic, cubic and quartic B-splines.
"""
import logging

from genspline import BSpline
from genspline.spline_plot import ascii_plot


def plot_spline(degree, points, knots):
    spline = BSpline(degree, points, knots)
    t_start, t_end = spline.knot_domain()
    logging.info(f"Plotting B-spline of degree {degree} with points: {points}, knots: {knots}")
    logging.info(f"Starting at {t_start}, ending at {t_end}")
    print(ascii_plot(spline, width=80, height=30))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    divider = '-' * 80
    plot_spline(2, [0.0, 0.0, 1.0, 0.0, 0.0], [0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 3.0, 3.0])
    print(f"{divider}\n\n{divider}")
    plot_spline(3, [0.0, 0.0, 0.0, 6.0, 0.0, 0.0, 0.0], [-2.0, -2.0, -2.0, -2.0, -1.0, 0.0, 1.0, 2.0, 2.0, 2.0, 2.0])
    print(f"{divider}\n\n{divider}")
    plot_spline(4, [0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0],
                [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 5.0, 5.0, 5.0, 5.0])
