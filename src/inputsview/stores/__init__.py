from inputsview.stores.base import Store
from inputsview.stores.inputs import InputsStore, load_inputs_file
from inputsview.stores.node import NodeStore, load_node_file

__all__ = ["Store", "InputsStore", "NodeStore", "load_inputs_file", "load_node_file"]
