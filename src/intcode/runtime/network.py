import logging as lg
from collections import deque
from typing import Iterable, Tuple

import intcode.common.hwconf as hw
from intcode.common.errors import ProtocolViolation, NetworkStalled
import intcode.runtime.cpu as cpu


Packet = Tuple[int, int]


class Nic:
    address: int
    proc: cpu.CPU
    queue: deque[int]   # Inbound x, y values
    outbox: list[int]

    def __init__(self, program: Iterable[int], address: int):
        self.address = address
        self.proc = cpu.CPU(program)
        self.queue = deque()
        self.outbox = []
        self.boot()

    def boot(self):
        self.proc.feed(self.address)
        self.collect()

    def collect(self):
        while isinstance(event := self.proc.run(), cpu.Output):
            self.outbox.append(event.value)

    def tick(self):
        if self.proc.halted:
            self.queue.clear()
            return

        if self.queue:
            self.proc.feed(*self.queue)
            self.queue.clear()
        else:
            self.proc.feed(hw.NO_PACKET)

        self.collect()

    def take_packets(self) -> list[Tuple[int, int, int]]:
        if len(self.outbox) % hw.PACKET_SIZE != 0:
            raise ProtocolViolation(
                f'Node {self.address} emitted {len(self.outbox)} values'
            )

        values = self.outbox
        self.outbox = []

        return [
            (values[i], values[i + 1], values[i + 2])
            for i in range(0, len(values), hw.PACKET_SIZE)
        ]


class Nat:
    last: Tuple[int, int] | None
    first_y: int | None
    injected_y: int | None

    def __init__(self):
        self.last = None
        self.first_y = None
        self.injected_y = None

    def receive(self, packet: Packet):
        if self.first_y is None:
            lg.info(f'First broadcast y {packet[1]}')
            self.first_y = packet[1]

        self.last = packet

    def wake(self, nic: Nic) -> int | None:
        if self.last is None:
            raise NetworkStalled('Network is idle and monitor holds no packet')

        x, y = self.last
        lg.debug(f'Monitor injects ({x}, {y}) into node {nic.address}')
        nic.queue.extend((x, y))

        repeated = y == self.injected_y
        self.injected_y = y

        return y if repeated else None


class Network:
    nics: list[Nic]
    nat: Nat
    rounds: int

    def __init__(self, program: Iterable[int], size: int = hw.NETWORK_SIZE):
        if not 1 <= size <= hw.BROADCAST_ADDRESS:
            raise ProtocolViolation(f'Network size {size} out of range')

        program = tuple(program)
        self.nics = [Nic(program, address) for address in range(size)]
        self.nat = Nat()
        self.rounds = 0

    def route(self, destination: int, packet: Packet):
        if destination == hw.BROADCAST_ADDRESS:
            self.nat.receive(packet)
            return

        if not 0 <= destination < len(self.nics):
            raise ProtocolViolation(f'Packet for unknown node {destination}')

        self.nics[destination].queue.extend(packet)

    def step(self):
        for nic in self.nics:
            nic.tick()

        # Routing starts only once every node had its turn
        for nic in self.nics:
            for destination, x, y in nic.take_packets():
                self.route(destination, (x, y))

        self.rounds += 1

    def idle(self) -> bool:
        return all(not nic.queue for nic in self.nics)

    def run(self) -> int:
        while True:
            self.step()

            if not self.idle():
                continue

            y = self.nat.wake(self.nics[hw.MONITOR_TARGET])

            if y is not None:
                lg.info(f'Monitor repeated y {y} after {self.rounds} rounds')
                return y
