"""Slug generator: three composed phases applied in a fixed order.

Every generator is ``finalize(process(pre_process(text)))``. Each phase is
one string transform, usually the composition of a list of smaller
transforms (see :func:`sequence`). Generators are immutable; the
``with_*`` methods derive new ones.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..transform.runes import (
    chain,
    chain_to_string_transform,
    dash_rule,
    space_rule,
    umlaut_rule,
    valid_slug_rune_rule,
)
from ..transform.strings import (
    Normalizer,
    collapse_repeated,
    strip_invalid,
    to_lower,
    trim,
    truncate,
)
from .model import NormalizationForm, Phase, StringTransform


def identity(text: str) -> str:
    return text


def sequence(*transforms: StringTransform) -> StringTransform:
    """Compose *transforms*, feeding each one's output to the next.

    An empty sequence is the identity.
    """
    steps = tuple(transforms)
    if not steps:
        return identity

    def composed(text: str) -> str:
        for step in steps:
            text = step(text)
        return text

    return composed


def default_pre_processors(
    form: NormalizationForm | str = NormalizationForm.NFKC,
    lowercase: bool = True,
) -> list[StringTransform]:
    """Strip invalid encoding units, normalize (unless NONE), then lowercase."""
    form = NormalizationForm.parse(form)
    steps: list[StringTransform] = [strip_invalid]
    if form is not NormalizationForm.NONE:
        steps.append(Normalizer(form))
    if lowercase:
        steps.append(to_lower)
    return steps


def default_rune_transform(separator: str = "-") -> StringTransform:
    """Whitespace to *separator*, dashes to '-', umlauts transliterated, rest filtered."""
    return chain_to_string_transform(
        chain(
            space_rule(separator),
            dash_rule,
            umlaut_rule,
            valid_slug_rune_rule,
        )
    )


def default_processors(separator: str = "-", *first: StringTransform) -> list[StringTransform]:
    """Run *first* (e.g. a replacer), then the default rune chain."""
    return [*first, default_rune_transform(separator)]


def default_finalizers(separator: str = "-", max_length: int = -1) -> list[StringTransform]:
    steps: list[StringTransform] = [collapse_repeated(separator), trim(separator)]
    if max_length >= 0:
        steps.append(truncate(max_length, separator))
    return steps


@dataclass(frozen=True)
class SlugGenerator:
    pre_process: StringTransform = identity
    process: StringTransform = identity
    finalize: StringTransform = identity

    @classmethod
    def empty(cls) -> SlugGenerator:
        """A generator that returns its input unchanged."""
        return cls()

    @classmethod
    def default(cls) -> SlugGenerator:
        return cls(
            pre_process=sequence(*default_pre_processors()),
            process=sequence(*default_processors()),
            finalize=sequence(*default_finalizers()),
        )

    @classmethod
    def from_phases(
        cls,
        pre_process: list[StringTransform],
        process: list[StringTransform],
        finalize: list[StringTransform],
    ) -> SlugGenerator:
        return cls(
            pre_process=sequence(*pre_process),
            process=sequence(*process),
            finalize=sequence(*finalize),
        )

    def generate(self, text: str) -> str:
        text = self.pre_process(text)
        text = self.process(text)
        return self.finalize(text)

    def modify(self, text: str) -> str:
        return self.generate(text)

    __call__ = generate

    def phase(self, phase: Phase) -> StringTransform:
        return getattr(self, phase.value)

    def with_transform(self, phase: Phase, transform: StringTransform) -> SlugGenerator:
        """Derive a generator running *transform* first in *phase*.

        The other two phases are shared unchanged; ``self`` is not modified.
        """
        fields = {
            Phase.PRE_PROCESS.value: self.pre_process,
            Phase.PROCESS.value: self.process,
            Phase.FINALIZE.value: self.finalize,
        }
        fields[phase.value] = sequence(transform, fields[phase.value])
        return SlugGenerator(**fields)

    def with_pre_processor(self, transform: StringTransform) -> SlugGenerator:
        return self.with_transform(Phase.PRE_PROCESS, transform)

    def with_processor(self, transform: StringTransform) -> SlugGenerator:
        return self.with_transform(Phase.PROCESS, transform)

    def with_finalizer(self, transform: StringTransform) -> SlugGenerator:
        return self.with_transform(Phase.FINALIZE, transform)


_DEFAULT_GENERATOR = SlugGenerator.default()


def generate_slug(text: str) -> str:
    """Generate a slug with the default configuration.

    Examples:
        >>> generate_slug("Hello World!! Isn't this amazing?")
        'hello-world-isnt-this-amazing'
    """
    return _DEFAULT_GENERATOR.generate(text)
