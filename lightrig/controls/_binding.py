import math
import numbers
import weakref

from ..utils import InvalidConfiguration, logger


class SliderBinding:
    """A slider that is bound to a numeric attribute of an object.

    A change of the slider is written to the attribute right away, using
    ``setattr``. The slider only restricts its own input to the range
    [min, max]; writes to the attribute that bypass the slider are not
    prevented.

    The binding holds a weak reference to the target, so it does not keep
    the target alive.

    Parameters
    ----------
    target : object
        The object that owns the attribute.
    attribute : str
        The name of the attribute to write to.
    min : float
        The lowest value of the slider.
    max : float
        The highest value of the slider.
    step : float
        The granularity of the slider. Also determines the number of
        decimals that the slider shows.
    label : str | None
        The label of the slider. Default the attribute name.

    """

    def __init__(self, target, attribute, min, max, step, label=None):
        if not isinstance(attribute, str) or not attribute:
            raise InvalidConfiguration(f"Invalid attribute name: {attribute!r}")
        if not hasattr(target, attribute):
            raise InvalidConfiguration(
                f"Cannot bind slider: {target!r} has no attribute {attribute!r}"
            )
        for name, value in [("min", min), ("max", max), ("step", step)]:
            if not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise InvalidConfiguration(
                    f"Slider {name} must be a finite number, not {value!r}"
                )
        if min >= max:
            raise InvalidConfiguration(
                f"Slider min must be smaller than max, got {min} and {max}"
            )
        if step <= 0:
            raise InvalidConfiguration(f"Slider step must be positive, got {step}")

        self._target_ref = weakref.ref(target)
        self._attribute = attribute
        self._min = float(min)
        self._max = float(max)
        self._step = float(step)
        self._label = attribute if label is None else str(label)

    def __repr__(self):
        return (
            f"<SliderBinding {self._label!r} -> .{self._attribute} "
            f"[{self._min}, {self._max}] at {hex(id(self))}>"
        )

    @property
    def target(self):
        """The bound object, or None if it no longer exists."""
        return self._target_ref()

    @property
    def attribute(self):
        return self._attribute

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    @property
    def step(self):
        return self._step

    @property
    def label(self):
        return self._label

    @property
    def decimals(self):
        """The number of decimals needed to show a value at the step's granularity."""
        return max(0, math.ceil(-math.log10(self._step) - 1e-9))

    @property
    def format(self):
        """A printf-style format for showing the value."""
        return f"%.{self.decimals}f"

    @property
    def value(self):
        """The current value of the bound attribute, or None if the target is gone."""
        target = self._target_ref()
        if target is None:
            return None
        return getattr(target, self._attribute)

    def set_value(self, value):
        """Handle a change of the slider: write the value to the bound attribute.

        The value is clipped to the slider's range. Returns the value that
        was written, or None if the target no longer exists.
        """
        target = self._target_ref()
        if target is None:
            logger.warning(f"Slider {self._label!r} is bound to a deleted object.")
            return None
        value = min(max(float(value), self._min), self._max)
        setattr(target, self._attribute, value)
        return value


class ControlPanel:
    """A collection of slider bindings, presented together as one panel.

    The panel itself does not draw anything; see ``ImguiPanel`` for a
    panel that is drawn with imgui on top of a canvas.

    Parameters
    ----------
    title : str
        The title of the panel.

    """

    def __init__(self, title="Controls"):
        self.title = str(title)
        self._bindings = []

    def __repr__(self):
        return f"<ControlPanel {self.title!r} with {len(self._bindings)} sliders>"

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self):
        return len(self._bindings)

    @property
    def bindings(self):
        """The slider bindings, in the order they were added (read-only)."""
        return tuple(self._bindings)

    def bind(self, obj, attribute, *, min, max, step, label=None):
        """Add a slider for ``obj.<attribute>``, and return its SliderBinding.

        Raises InvalidConfiguration if the bounds are malformed or the
        attribute does not exist.
        """
        binding = SliderBinding(obj, attribute, min, max, step, label)
        self._bindings.append(binding)
        logger.debug(f"Bound slider {binding.label!r} to {obj!r}.{attribute}")
        return binding

    def add_slider(self, target, attribute, min, max, step, label=None):
        """Add a slider, with positional bounds. See ``bind()``."""
        return self.bind(target, attribute, min=min, max=max, step=step, label=label)

    def get(self, label):
        """Get the binding with the given label."""
        for binding in self._bindings:
            if binding.label == label:
                return binding
        raise KeyError(f"No slider with label {label!r}")

    def set_value(self, label, value):
        """Simulate a change of the slider with the given label."""
        return self.get(label).set_value(value)
