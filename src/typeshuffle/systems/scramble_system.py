from esper import World

from typeshuffle.components.delay import Delay
from typeshuffle.components.scramble_step import ScrambleStep
from typeshuffle.events.bus import EVENT_TICK, EventBus


class ScrambleSystem:
    """Timer wheel for scramble steps.

    Every tick subtracts the elapsed milliseconds from each pending step's
    Delay. A due step is advanced by its engine and, while it has iterations
    left, rescheduled ``step_interval`` later. Overshoot carries over, so a
    long tick may advance one cell several times, always in iteration order.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        elapsed_ms = dt * 1000.0
        for ent, (step, delay) in list(self.world.get_components(ScrambleStep, Delay)):
            if not self.world.entity_exists(ent):
                # Cancelled by an earlier step's completion handler this tick.
                continue
            delay.remaining -= elapsed_ms
            alive = True
            while alive and delay.due:
                more = step.engine.advance(step)
                if not self.world.entity_exists(ent):
                    # Cancelled from a handler of the step just advanced.
                    break
                if more:
                    delay.remaining += step.engine.step_interval
                else:
                    alive = False
            if not alive:
                self.world.delete_entity(ent, immediate=True)

    @property
    def pending(self) -> int:
        return len(self.world.get_component(ScrambleStep))
