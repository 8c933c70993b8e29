"""
Evolution engine for the knapsack solver.

This module drives the generational loop: initialization, evaluation,
elitist breeding via roulette-wheel selection and single-point crossover,
and bit-flip mutation of the whole new population.
"""

import logging
from typing import List, Optional, Sequence, Union, Tuple
import numpy as np

from ..initialization.generators import ChromosomeFactory
from ..selection.roulette import RouletteWheelSelector
from ..variation.crossover import SinglePointCrossover
from ..variation.mutation import BitFlipMutation
from ..core.fitness import FitnessEvaluator
from ..core.item import Item, KnapsackInstance
from ..core.population import Population
from ..core.solution import Solution
from ..utils.listeners import EvolutionListener
from .config import EvolutionEngineConfig, GenerationHistory

logger = logging.getLogger(__name__)


class EvolutionEngine:
    """
    Genetic-algorithm engine for the 0/1 knapsack problem.

    The engine owns the population, the best-known Solution and a single
    seeded random generator shared by every stochastic operator. Draws are
    consumed in a fixed order (initial chromosomes, then per generation two
    selection draws and one cut draw per child, then the mutation draws of
    every chromosome), so a run is fully reproducible from its seed.

    Example usage:
        ```python
        engine = EvolutionEngine(
            items=make_items([(2, 3), (3, 4), (4, 5)]),
            capacity=5,
            config=EvolutionEngineConfig(iterations=50, population_size=20,
                                         mutation_rate=0.01, seed=42),
            listeners=[LoggingReporter()]
        )

        solution = engine.solve()
        ```
    """

    def __init__(
        self,
        items: Sequence[Union[Item, Tuple[int, int]]],
        capacity: int,
        config: Optional[EvolutionEngineConfig] = None,
        listeners: Optional[List[EvolutionListener]] = None
    ):
        """
        Initialize the evolution engine.

        Args:
            items: Ordered item set, as Item objects or (weight, value) pairs
            capacity: Knapsack capacity (non-negative)
            config: Engine configuration hyperparameters (defaults if None)
            listeners: Reporters receiving progress and improvement events

        Raises:
            ValueError: If the item set is empty or any parameter is out of range
        """
        if not items:
            raise ValueError("items must contain at least one item")
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")

        self.items: List[Item] = [
            item if isinstance(item, Item) else Item(weight=int(item[0]), value=int(item[1]))
            for item in items
        ]
        self.capacity = capacity
        self.config = config if config is not None else EvolutionEngineConfig()
        self.listeners: List[EvolutionListener] = list(listeners) if listeners else []

        # An unseeded run still gets a concrete seed so it can be replayed
        if self.config.seed is None:
            self._seed = int(np.random.SeedSequence().entropy)
        else:
            self._seed = self.config.seed
        self.rng = np.random.default_rng(self._seed)

        # Operators share the engine's generator
        self.fitness_evaluator = FitnessEvaluator(self.items, self.capacity)
        self.factory = ChromosomeFactory(len(self.items), self.rng)
        self.selector = RouletteWheelSelector(self.rng)
        self.crossover = SinglePointCrossover(self.rng)
        self.mutation = BitFlipMutation(self.config.mutation_rate, self.rng)

        # State tracking
        self.generation: int = 0
        self.history: List[GenerationHistory] = []
        self._population = Population()
        self._solution = Solution.empty(len(self.items))

        # Configure logging
        logging.getLogger().setLevel(getattr(logging, self.config.log_level))

        logger.debug(f"Random generator seeded with {self._seed}")
        logger.info(f"Initialized EvolutionEngine with {len(self.items)} items, "
                   f"capacity {self.capacity}, {self.config.iterations} iterations, "
                   f"population size {self.config.population_size}, "
                   f"mutation rate {self.config.mutation_rate}")

    @classmethod
    def from_instance(
        cls,
        instance: KnapsackInstance,
        config: Optional[EvolutionEngineConfig] = None,
        listeners: Optional[List[EvolutionListener]] = None
    ) -> "EvolutionEngine":
        """Create an engine for a KnapsackInstance."""
        return cls(instance.items, instance.capacity, config=config, listeners=listeners)

    @property
    def seed(self) -> int:
        """Seed of the engine's random generator."""
        return self._seed

    @property
    def solution(self) -> Solution:
        """Best solution found so far (final once ``solve`` returns)."""
        return self._solution

    @property
    def population(self) -> Population:
        """Current population (empty before ``solve``)."""
        return self._population

    def add_listener(self, listener: EvolutionListener) -> None:
        """Register a reporter for progress and improvement events."""
        self.listeners.append(listener)

    def solve(self) -> Solution:
        """
        Run the genetic search for the configured number of iterations.

        Returns:
            Best solution found. With zero iterations this is the initial
            all-false solution with fitness 0.
        """
        total = self.config.iterations
        self._notify("on_start", self._seed, self.config.to_dict())

        # Step 1: Generation 0
        self._population = self.factory.generate_population(self.config.population_size)

        # Step 2: Main loop
        for generation in range(total):
            self.generation = generation
            self._notify("on_generation", generation, total)

            # a. Evaluate
            fitnesses = self.fitness_evaluator.evaluate_population(self._population)

            # b. Record the best ever solution
            self._update_solution(fitnesses, generation)
            self._log_generation_stats(generation, fitnesses)

            # c. Breed the next population around the best-known chromosome
            new_population = self._breed(fitnesses)

            # d. Mutate everyone, the elite copy included
            self._mutate(new_population)

            self._population = new_population

        logger.info(f"Evolution complete. Best fitness: {self._solution.fitness}")
        self._notify("on_finish", self._solution)

        return self._solution

    def _update_solution(self, fitnesses: List[int], generation: int) -> None:
        """
        Overwrite the solution if this generation holds a strictly better chromosome.

        Args:
            fitnesses: Fitness of each chromosome, in population order
            generation: Current generation index
        """
        best_idx, best_fitness = self._population.best(fitnesses)

        if best_fitness > self._solution.fitness:
            self._solution.update(self._population[best_idx], best_fitness, generation)
            logger.debug(f"Solution improved to {best_fitness} at generation {generation}")
            self._notify("on_improvement", best_fitness, generation)

    def _breed(self, fitnesses: List[int]) -> Population:
        """
        Build the next population.

        The first slot holds a copy of the best-known chromosome; every other
        slot is the crossover child of two roulette-wheel selected parents.

        Args:
            fitnesses: Fitness of each chromosome, in population order

        Returns:
            New population of ``population_size`` chromosomes
        """
        new_population = Population([self._solution.chromosome.copy()])
        fitness_sum = sum(fitnesses)

        while new_population.size < self.config.population_size:
            parent1 = self.selector.select(self._population, fitnesses, fitness_sum)
            parent2 = self.selector.select(self._population, fitnesses, fitness_sum)
            new_population.add(self.crossover.crossover(parent1, parent2))

        return new_population

    def _mutate(self, population: Population) -> None:
        """Mutate every chromosome of a population in place."""
        n_flipped = 0
        for chromosome in population:
            n_flipped += self.mutation.mutate(chromosome)

        logger.debug(f"Mutation flipped {n_flipped} genes")

    def _log_generation_stats(self, generation: int, fitnesses: List[int]) -> None:
        """
        Compute and record statistics for the current generation.

        Args:
            generation: Current generation index
            fitnesses: Fitness of each chromosome, in population order
        """
        stats = self._population.statistics(fitnesses)

        history = GenerationHistory(
            generation=generation,
            population_size=stats['size'],
            avg_fitness=stats['avg_fitness'],
            best_fitness=stats['best_fitness'],
            worst_fitness=stats['worst_fitness'],
            n_scoring=stats['scoring'],
            solution_fitness=self._solution.fitness
        )

        self.history.append(history)

        level = logging.INFO if self.config.log_generation_stats else logging.DEBUG
        logger.log(
            level,
            f"Gen {generation}: "
            f"fitness={stats['avg_fitness']:.1f}/{stats['best_fitness']}, "
            f"scoring={stats['scoring']}/{stats['size']}, "
            f"solution={self._solution.fitness}"
        )

    def _notify(self, event: str, *args) -> None:
        """Dispatch an event to every registered listener."""
        for listener in self.listeners:
            getattr(listener, event)(*args)
