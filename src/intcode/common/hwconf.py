NETWORK_SIZE = 50           # Nodes booted by default
BROADCAST_ADDRESS = 255     # Packets to this address go to the monitor
MONITOR_TARGET = 0          # Node woken up by the monitor when idle
NO_PACKET = -1              # Fed to a node whose queue is empty
PACKET_SIZE = 3             # destination, x, y

ASCII_MIN = 0
ASCII_MAX = 255             # Anything outside is an out-of-band value
