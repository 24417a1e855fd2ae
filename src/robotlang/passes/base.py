"""
Base Pass System

Passes run over a whole Program. Rewriting passes mutate the statement trees
in place; analysis passes leave the program alone and store their results in
the PassContext.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Set, Type

from ..shared.errors import PassOrderError
from ..shared.nodes import Program

logger = logging.getLogger("robotlang.passes.base")


class PassContext:
    """
    Shared state for one pass-manager run.

    - Analysis results stored here (not in passes), keyed by pass class
    - One context per program
    """

    def __init__(self):
        self._analysis_results: Dict[Type['BasePass'], Any] = {}

    def has_analysis(self, pass_class: Type['BasePass']) -> bool:
        return pass_class in self._analysis_results

    def get_analysis(self, pass_class: Type['BasePass']) -> Any:
        """Get analysis results from a pass"""
        if pass_class not in self._analysis_results:
            raise KeyError(f"Analysis {pass_class.__name__} not available")
        return self._analysis_results[pass_class]

    def set_analysis(self, pass_class: Type['BasePass'], results: Any) -> None:
        """Store analysis results"""
        self._analysis_results[pass_class] = results


class BasePass(ABC):
    """
    Base class for all passes.

    - Explicit dependencies via `requires`
    - Pass results stored in PassContext (not in pass)
    - run() returns the program (the same object for in-place passes)
    """
    requires: List[Type['BasePass']] = []  # Dependencies (empty by default)

    @abstractmethod
    def run(self, program: Program, ctx: PassContext) -> Program:
        raise NotImplementedError


class PassManager:
    """
    Pass manager with dependency resolution.

    - Passes run in dependency order (topological sort, registration order on ties)
    - Single PassContext shared across all passes
    """

    def __init__(self):
        self.passes: List[Type[BasePass]] = []
        self._dependency_graph: Dict[Type[BasePass], Set[Type[BasePass]]] = {}

    def register_pass(self, pass_class: Type[BasePass]) -> None:
        """Register a pass"""
        if pass_class in self._dependency_graph:
            return
        self.passes.append(pass_class)
        self._dependency_graph[pass_class] = set(pass_class.requires)

    def run_all(self, program: Program, ctx: PassContext, dump_tree: bool = False) -> Program:
        """
        Run all passes in dependency order.

        Args:
            program: Input program
            ctx: Pass context
            dump_tree: If True, log the program S-expression after each pass (DEBUG)
        """
        for pass_class in self._topological_sort():
            pass_name = pass_class.__name__
            logger.debug(f"Running {pass_name}")
            program = pass_class().run(program, ctx)

            if dump_tree:
                from ..shared.serialization import serialize_program
                logger.debug(f"After {pass_name}:\n{serialize_program(program)}")

        return program

    def _topological_sort(self) -> List[Type[BasePass]]:
        """Topological sort of passes by dependencies"""
        for pass_class, required in self._dependency_graph.items():
            missing = [r.__name__ for r in required if r not in self._dependency_graph]
            if missing:
                raise PassOrderError(
                    f"{pass_class.__name__} requires unregistered pass(es): {', '.join(sorted(missing))}"
                )

        in_degree = {p: len(self._dependency_graph[p]) for p in self.passes}
        queue = [p for p, degree in in_degree.items() if degree == 0]
        result = []

        while queue:
            pass_class = queue.pop(0)
            result.append(pass_class)

            for other_pass in self.passes:
                if pass_class in self._dependency_graph[other_pass]:
                    in_degree[other_pass] -= 1
                    if in_degree[other_pass] == 0:
                        queue.append(other_pass)

        if len(result) != len(self.passes):
            raise PassOrderError("Circular dependency detected in passes")

        return result
