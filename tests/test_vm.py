from subleq_spire.vm import MAX_CYCLES, SubleqVM


def test_basic_subtraction():
    memory = [0] * 64
    memory[0] = 3
    vm = SubleqVM.load([0, 1, 99], 0, memory)
    assert memory[:3] == [0, 1, 99]
    assert vm.step(memory)
    assert memory[1] == 1
    assert vm.pc == 3


def test_branch_on_negative():
    memory = [0] * 64
    memory[0] = 5
    memory[1] = 3
    memory[2] = 0
    memory[3] = 1
    memory[4] = 10
    vm = SubleqVM(pc=2, base_addr=2, program_len=3)
    assert vm.step(memory)
    assert memory[1] == -2
    assert vm.pc == 10
    assert vm.cycles == 1


def test_halt_on_out_of_bounds_pc():
    memory = [0] * 8
    vm = SubleqVM(pc=6)
    assert not vm.step(memory)
    assert not vm.alive


def test_halt_on_cycle_limit():
    memory = [0] * 64
    vm = SubleqVM.load([0, 0, 0], 0, memory)
    vm.run_to_death(memory)
    assert not vm.alive
    assert vm.cycles == MAX_CYCLES


def test_halt_on_invalid_address():
    memory = [0] * 64
    vm = SubleqVM.load([999, 0, 0], 0, memory)
    assert not vm.step(memory)
    assert not vm.alive


def test_negative_address_halts():
    memory = [0] * 16
    vm = SubleqVM.load([-1, 0, 0], 0, memory)
    assert not vm.step(memory)
    assert not vm.alive


def test_jump_target_out_of_bounds_halts():
    memory = [0] * 16
    vm = SubleqVM.load([0, 0, 50], 0, memory)
    assert not vm.step(memory)
    assert not vm.alive
    assert vm.cycles == 0


def test_dead_vm_stays_dead():
    memory = [0] * 16
    vm = SubleqVM(pc=0, alive=False)
    assert not vm.step(memory)
    assert memory == [0] * 16


def test_load_truncates_at_memory_end():
    memory = [0] * 8
    vm = SubleqVM.load([1, 2, 3, 4], 6, memory)
    assert memory[6:] == [1, 2]
    assert vm.program_len == 2
    assert vm.pc == 6
    assert vm.base_addr == 6


def test_subtraction_wraps_like_i64():
    memory = [0] * 8
    memory[0:3] = [4, 5, 6]
    memory[4] = 1
    memory[5] = -(2**63)
    vm = SubleqVM(pc=0)
    assert vm.step(memory)
    assert memory[5] == 2**63 - 1
    assert vm.pc == 3