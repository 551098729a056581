"""
RulerProcessor — the run context that wires the compiler stages to a tree.

One processor is one run: it owns the ScaleRegistry (seeded from the run
configuration) and visits stylesheets in document order:

  1. ``@ruler scale(...)``   → Parameter Extractor → Scale Compiler;
                               the entries are registered and the at-rule is
                               replaced by one ``--<prefix>-<label>``
                               declaration per entry
  2. ``@ruler utility(...)`` → Parameter Extractor → Utility Expander;
                               the at-rule is replaced by the generated rules
  3. every declaration       → Declaration Rewriter (value changed in place
                               only if an inline call was found)

Scales must be defined before the utilities that use them.  Any error aborts
the run; nodes already rewritten before the failure stay rewritten.
"""

from __future__ import annotations

import logging
from typing import Optional

from ruler.config import RulerConfig
from ruler.css.nodes import AtRule, Container, Declaration, Rule
from ruler.fluid import rewrite_fluid_calls
from ruler.params import extract_scale_config, extract_utility_config, parse_directive
from ruler.registry import ScaleRegistry
from ruler.scale import compile_scale, custom_property_name
from ruler.utility import expand_utility

logger = logging.getLogger(__name__)

DIRECTIVE_NAME = "ruler"


class RulerProcessor:
    """
    Processes stylesheet trees for a single run.

    Instantiate once per run.  Several roots may be processed by the same
    instance; scales defined in an earlier root are visible to later ones.
    """

    def __init__(self, config: Optional[RulerConfig] = None) -> None:
        self.config = config or RulerConfig()
        self.registry = ScaleRegistry.from_configs(self.config.scales)

    def process(self, root: Container) -> Container:
        """Rewrite *root* in place and return it."""
        self._visit(root)
        return root

    def _visit(self, container: Container) -> None:
        # Snapshot: replaced nodes are not revisited and generated nodes are not visited.
        for node in list(container.nodes):
            if isinstance(node, AtRule) and node.name == DIRECTIVE_NAME:
                self._process_directive(node)
            elif isinstance(node, (AtRule, Rule)):
                self._visit(node)
            elif isinstance(node, Declaration):
                self._process_declaration(node)

    def _process_directive(self, at_rule: AtRule) -> None:
        params = at_rule.params.lstrip()
        if params.startswith("scale("):
            self._process_scale(at_rule)
        elif params.startswith("utility("):
            self._process_utility(at_rule)
        else:
            logger.debug("Ignoring unrecognized @ruler directive: %r", at_rule.params)

    def _process_scale(self, at_rule: AtRule) -> None:
        config = extract_scale_config(
            parse_directive(at_rule.params, "scale"),
            min_width=self.config.min_width,
            max_width=self.config.max_width,
            generate_all_cross_pairs=self.config.generate_all_cross_pairs,
        )
        entries = compile_scale(config)
        self.registry.register(config.prefix, entries)
        logger.debug("Registered scale %r (%d entries)", config.prefix, len(entries))

        at_rule.replace_with(
            *(
                Declaration(custom_property_name(config.prefix, entry.label), entry.rendered)
                for entry in entries
            )
        )

    def _process_utility(self, at_rule: AtRule) -> None:
        utility = extract_utility_config(parse_directive(at_rule.params, "utility"))
        rules = expand_utility(utility, self.registry, self.config)
        at_rule.replace_with(
            *(
                Rule(
                    rule.selector,
                    [Declaration(prop, value) for prop, value in rule.declarations],
                )
                for rule in rules
            )
        )

    def _process_declaration(self, decl: Declaration) -> None:
        value = rewrite_fluid_calls(decl.value, self.config.min_width, self.config.max_width)
        if value != decl.value:
            decl.value = value
