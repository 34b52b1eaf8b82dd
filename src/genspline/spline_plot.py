"""
Functions to plot B-spline curves.
"""
import logging

import numpy as np
import plotly.offline as pl
import plotly.graph_objs as go
import matplotlib.pyplot as plt


def _xy(point):
    """
    Plane coordinates of a 2d control point or curve value.
    """
    if hasattr(point, 'x') and hasattr(point, 'y'):
        return point.x, point.y
    return point[0], point[1]


class PlottingPlotly:
    def __init__(self):
        self.i_figure = -1
        self._reinit()

    def _reinit(self):
        self.i_figure += 1
        self.data_2d = []

    def add_curve_2d(self, X, Y, **kwargs):
        self.data_2d.append(go.Scatter(x=list(X), y=list(Y), mode='lines'))

    def add_points_2d(self, X, Y, colors=None, **kwargs):
        if colors is None:
            color = 'red'
        else:
            color = ['rgb({}, {}, {})'.format(*rgb) for rgb in colors]
        marker = dict(
            size=kwargs.get('size', 10),
            color=color,
        )
        self.data_2d.append(go.Scatter(x=list(X), y=list(Y),
                                       mode='markers',
                                       marker=marker))

    def show(self, fname=None):
        """
        Write added plots to the HTML file and clear the list for other plotting.
        :param fname: Output file, 'spline_plot_2d_<i>.html' by default.
        :return: file name
        """
        if fname is None:
            fname = 'spline_plot_2d_%d.html' % (self.i_figure)
        fig_2d = go.Figure(data=self.data_2d)
        pl.plot(fig_2d, filename=fname, auto_open=False)
        self._reinit()
        return fname


class PlottingMatplot:
    def __init__(self):
        self._reinit()

    def _reinit(self):
        self.fig_2d, self.ax_2d = plt.subplots()

    def add_curve_2d(self, X, Y, **kwargs):
        self.ax_2d.plot(X, Y, **kwargs)

    def add_points_2d(self, X, Y, colors=None, **kwargs):
        if colors is None:
            self.ax_2d.plot(X, Y, 'o', color='red', **kwargs)
        else:
            rgb = np.array(colors, dtype=float) / 255
            self.ax_2d.scatter(X, Y, c=rgb, s=kwargs.get('size', 4))

    def show(self, fname=None):
        """
        Show added plots or save them to the file 'fname'.
        :return: file name
        """
        if fname is None:
            plt.show()
        else:
            self.fig_2d.savefig(fname)
        plt.close(self.fig_2d)
        self._reinit()
        return fname


class Plotting:
    """
    Debug plotting class. Several 2d plots can be added and finally displayed on common figure
    calling self.show(). Matplotlib or plotly library is used as backend.
    """
    def __init__(self, backend=None):
        if backend is None:
            backend = PlottingPlotly()
        self.backend = backend

    def plot_2d(self, X, Y):
        """
        Add line scatter plot. Every plot use automatically different color.
        :param X: x-coords of points
        :param Y: y-coords of points
        """
        self.backend.add_curve_2d(X, Y)

    def scatter_2d(self, X, Y):
        """
        Add point scatter plot. Every plot use automatically different color.
        :param X: x-coords of points
        :param Y: y-coords of points
        """
        self.backend.add_points_2d(X, Y)

    def plot_curve_1d(self, spline, n_points=100):
        """
        Add graph of a scalar spline t -> y.
        """
        t_min, t_max = spline.knot_domain()
        t_coord = np.linspace(t_min, t_max, n_points)
        self.backend.add_curve_2d(t_coord, spline.eval_array(t_coord))

    def plot_curve_2d(self, spline, n_points=100, poles=False):
        """
        Add plot of a 2d B-spline curve.
        :param spline: BSpline t -> x,y; values are Point2, arrays or pairs.
        :param n_points: Number of evaluated points.
        :param poles: Plot also the control points.
        """
        t_min, t_max = spline.knot_domain()
        t_coord = np.linspace(t_min, t_max, n_points)

        coords = [_xy(spline.eval(t)) for t in t_coord]
        x_coord, y_coord = zip(*coords)

        self.backend.add_curve_2d(x_coord, y_coord)
        if poles:
            self.plot_curve_poles_2d(spline)

    def plot_curve_poles_2d(self, spline):
        """
        Plot control points of the B-spline curve.
        :param spline: BSpline t -> x,y
        :return: Plot object.
        """
        x_poles, y_poles = zip(*[_xy(pt) for pt in spline.control_points])
        return self.backend.add_points_2d(x_poles, y_poles)

    def plot_colored_curve_2d(self, spline, colors, n_points=1000):
        """
        Plot a 2d curve colored by the second spline.
        :param spline: BSpline t -> x,y
        :param colors: BSpline t -> Colorf, with the same domain as 'spline'.
        """
        t_min, t_max = spline.knot_domain()
        t_coord = np.linspace(t_min, t_max, n_points)
        x_coord, y_coord = zip(*[_xy(spline.eval(t)) for t in t_coord])
        rgb = [colors.eval(t).to_srgb().to_rgb8() for t in t_coord]
        self.backend.add_points_2d(x_coord, y_coord, colors=rgb, size=4)

    def show(self, fname=None):
        """
        Display added plots. Empty the queue.
        :return:
        """
        return self.backend.show(fname)


def ascii_plot(spline, width=80, height=30, y_range=None, n_samples=None):
    """
    Plot graph of a scalar spline as text, sampled points are marked by 'O'.
    :param spline: BSpline t -> float
    :param width: Number of columns.
    :param height: Number of rows.
    :param y_range: (y_min, y_max) of the canvas, range of the values by default.
    :param n_samples: Number of evaluated points, 10 per column by default.
    :return: str, rows separated by newlines
    """
    if n_samples is None:
        n_samples = 10 * width
    t_min, t_max = spline.knot_domain()
    t_coord = np.linspace(t_min, t_max, n_samples)
    values = spline.eval_array(t_coord)
    if y_range is None:
        y_range = (float(np.min(values)), float(np.max(values)))
    y_min, y_max = y_range
    y_size = (y_max - y_min) or 1.0
    t_size = (t_max - t_min) or 1.0

    canvas = [[' '] * width for _ in range(height)]
    n_out = 0
    for t, y in zip(t_coord, values):
        ix = int((t - t_min) / t_size * (width - 1))
        iy = int(round((y - y_min) / y_size * (height - 1)))
        if 0 <= iy < height:
            canvas[height - 1 - iy][ix] = 'O'
        else:
            n_out += 1
    if n_out:
        logging.warning(f"#{n_out} points out of the plot range: {y_range}")
    return "\n".join("".join(row) for row in canvas)
